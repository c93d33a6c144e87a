from argparse import ArgumentParser
from datetime import timedelta

from simple_timer import Timer
from simple_timer.logging import get_logger, configure_logging

logger = get_logger()

def run(tick: Timer, end: Timer) -> int:
    """Poll both timers until `end` expires, resetting `tick` on each expiry. Returns the tick count."""
    ticks = 0
    while True:
        if tick.expired:
            ticks += 1
            logger.debug("tick", timer="tick", count=ticks, elapsed=tick.elapsed)
            tick.reset()

        if end.expired:
            break

        # Sleep until whichever timer expires first rather than spinning.
        min(tick, end, key=lambda timer: timer.remaining).wait()

    return ticks

def main():
    parser = ArgumentParser()
    parser.add_argument("--tick-ms", type=int, default=100, help="Interval between ticks in milliseconds")
    parser.add_argument("--end-ms", type=int, default=1000, help="Total run time in milliseconds")
    parser.add_argument("--verbose", action="store_true", help="Log every tick")
    args = parser.parse_args()

    configure_logging(args.verbose)

    tick = Timer.with_duration(timedelta(milliseconds=args.tick_ms))
    end = Timer.with_duration(timedelta(milliseconds=args.end_ms))
    logger.info("Starting control loop", tick=tick.duration, end=end.duration)

    ticks = run(tick, end)
    logger.info(f"Completed {ticks} ticks", total=end.elapsed)

if __name__ == "__main__":
    main()
