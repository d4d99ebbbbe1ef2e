"""Simulated progress -- the smallest possible walkthrough.

Demonstrates:
- Creating an engine with the default configuration
- Observing every emitted progress value
- Stepping the timer by hand with ManualDriver
- Watching the ramp, accelerate, and settle phases go by
- Holding at the stop threshold, then completing

Run: python -m examples.basics
"""

from tick_progress import ManualDriver, ProgressEngine


def main() -> None:
    print("=== Simulated progress ===\n")

    driver = ManualDriver()
    engine = ProgressEngine(driver=driver)

    last_phase = engine.phase

    def report(value: float) -> None:
        nonlocal last_phase
        if engine.phase is not last_phase:
            print(
                f"  tick {engine.tick_number:>5}  |  {last_phase.value} -> "
                f"{engine.phase.value}  |  progress={value:6.2f}"
            )
            last_phase = engine.phase
        elif engine.tick_number % 250 == 0:
            print(f"  tick {engine.tick_number:>5}  |  progress={value:6.2f}")

    engine.on_progress(report)
    engine.activate()

    # Tick until the engine parks itself at the stop threshold.
    while engine.running:
        driver.step()

    elapsed = engine.clock.elapsed
    print(
        f"\nHolding at {engine.progress:.2f} after {engine.tick_number} ticks "
        f"(~{elapsed:.1f}s at {engine.config.tick_interval_ms}ms per tick)."
    )

    engine.complete()
    print(f"Completed: progress={engine.progress}")


if __name__ == "__main__":
    main()
