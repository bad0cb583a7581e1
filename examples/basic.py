"""Time three stages and print the summary."""

import time

from lapwatch import start_timer


def main() -> None:
    timer = start_timer("basic")

    timer.checkpoint("initialization")
    time.sleep(0.5)

    timer.checkpoint("process_data")
    time.sleep(0.3)

    timer.checkpoint("cleanup")

    result = timer.finalize()
    print(result.summary())
    print(f"{result:#}")


if __name__ == "__main__":
    main()
