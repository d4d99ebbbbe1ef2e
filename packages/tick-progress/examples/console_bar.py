"""A background call with a simulated progress bar in the terminal.

Demonstrates:
- ProgressBar driven by its flags (active, completed)
- ThreadDriver ticking the engine while the main thread works
- Rendering the bar model as text

Run: python -m examples.console_bar
"""

import sys
import time

from tick_progress import ProgressBar, ThreadDriver

WIDTH = 40


def draw(value: float) -> None:
    filled = int(WIDTH * min(value, 100) / 100)
    sys.stdout.write(f"\r  |{'#' * filled}{'-' * (WIDTH - filled)}| {value:6.2f}%")
    sys.stdout.flush()


def slow_call() -> None:
    time.sleep(3.0)


def main() -> None:
    print("=== Console bar ===\n")
    driver = ThreadDriver()
    bar = ProgressBar(
        active=True,
        animation={"intervalDelay": 16, "incrementSpeed": 0.02},
        on_progress=draw,
        driver=driver,
    )
    slow_call()
    bar.update(completed=True)
    bar.close()
    driver.shutdown(timeout=1.0)
    print(f"\n\n  aria-valuenow={bar.render().attributes()['aria-valuenow']}")


if __name__ == "__main__":
    main()
