"""Headless walk-through -- tap, tick, and watch the chain bounce.

Demonstrates:
- Building a linked five node chain from a FoldConfig
- Driving animations with Driver.activate() and Driver.run()
- Listening for completions and frames with hooks

Run: python -m examples.basics
"""

from unfold import Completion, Driver, FoldConfig, Frame, NodeChain, Sequencer


def main() -> None:
    print("=== Unfold basics ===\n")

    config = FoldConfig.linked()
    sequencer = Sequencer(NodeChain(config))

    # No real waiting between ticks here.
    driver = Driver(sequencer, sleep=lambda seconds: None)

    frames: list[Frame] = []
    driver.on_frame(frames.append)

    def report(completion: Completion) -> None:
        print(
            f"  node {completion.index} settled at {completion.scale:.0f}"
            f"  |  next node {sequencer.current.index}"
            f"  |  direction {sequencer.direction:+d}"
        )

    driver.on_complete(report)

    # Ten taps: forward across the chain and back again.
    for _ in range(10):
        driver.activate()
        driver.run()

    print(f"\nDone. {driver.clock.tick_number} ticks, {len(frames)} frames.")
    print(f"Last frame draws: {list(frames[-1].nodes)}")


if __name__ == "__main__":
    main()
