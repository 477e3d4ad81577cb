"""Command-line entry point: replay a sleep dial check-in and print the summary"""
import argparse
import logging
import sys

from src.config import validate_config, LOG_LEVEL
from src.exceptions import ClarityError
from src.handlers.sleep_dial import Handle
from src.models.clock import ClockTime
from src.services.sleep_checkin import SleepCheckInSession

# Configure logging
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO)
)

logger = logging.getLogger(__name__)


def drag_handle(session: SleepCheckInSession, handle: Handle, target: ClockTime) -> None:
    """Grab a handle where it sits and drag it to `target`"""
    geometry = session.selector.geometry
    current = session.bedtime if handle is Handle.BEDTIME else session.wake_time
    start = geometry.point_for_time(current)
    end = geometry.point_for_time(target)

    if session.selector.hit_test(start) is not handle:
        # handles overlap and the tie goes to the other one; set the value directly
        logger.info(f"{handle.value} handle is covered, setting {target} directly")
        setter = session.set_bedtime if handle is Handle.BEDTIME else session.set_wake_time
        setter(target.snapped(session.selector.snap_minutes))
        return

    session.touch_start(start.x, start.y)
    session.touch_move(end.x, end.y)
    session.touch_end()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Replay a sleep dial check-in")
    parser.add_argument("--bedtime", type=ClockTime.parse, help="Bedtime as HH:MM")
    parser.add_argument("--wake", type=ClockTime.parse, help="Wake time as HH:MM")
    args = parser.parse_args(argv)

    try:
        logger.info("Validating configuration...")
        validate_config()

        session = SleepCheckInSession()
        if args.bedtime is not None:
            drag_handle(session, Handle.BEDTIME, args.bedtime)
        if args.wake is not None:
            drag_handle(session, Handle.WAKE_TIME, args.wake)

        summary = session.complete()
    except ClarityError as e:
        print(e.user_message, file=sys.stderr)
        return 1

    print(f"Bedtime:     {summary.bedtime_display}")
    print(f"Wake up:     {summary.wake_time_display}")
    print(f"Total sleep: {summary.duration_display}")
    print(f"Arc:         {session.selector.arc_path()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
