"""For running activitystats on an exported list of registrations"""
import json
import sys
import dotenv
from activitystats import (compute_activity_stats, compute_progress_summary, parse_registrations,
                           with_derived_state)
from activitystats.config import load_settings
from activitystats.logs import setup_logger


def main(argv: list[str]) -> int:
    """Prints the statistics and certificate progress of the registrations in argv[1]"""
    dotenv.load_dotenv()
    if len(argv) != 2:
        print('Usage: python -m activitystats <registrations.json>')
        return 1

    try:
        settings = load_settings()
    except ValueError as e:
        print(f'Invalid configuration: {e}')
        return 1
    logger = setup_logger(settings.log_level)

    try:
        with open(argv[1], 'r', encoding='utf-8') as export:
            payload = json.load(export)
        registrations = parse_registrations(payload, settings.timezone)
    except (OSError, ValueError) as e:
        logger.error('Could not read registrations from %s: %s', argv[1], e)
        return 1

    if settings.derive_state:
        registrations = [with_derived_state(registration) for registration in registrations]

    stats = compute_activity_stats(registrations).to_dict()
    for bucket in ('registered', 'attended', 'canceled', 'absent'):
        stats[bucket] = [registration.id for registration in stats[bucket]]
    progress = compute_progress_summary(registrations, settings.targets)
    logger.info('Aggregated %i registrations', stats['totalActivities'])

    print(json.dumps({'stats': stats, 'progress': progress.to_dict()},
                     indent=2, ensure_ascii=False))
    return 0


def run():
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
