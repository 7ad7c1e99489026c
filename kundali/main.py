# main.py

import argparse
import json
import logging
import sys

from tabulate import tabulate

from kundali import settings
from kundali.core import aspects, calc, dasha
from kundali.core.chart import BirthDetails, calculate_kundali, format_chart_display
from kundali.errors import ValidationError
from kundali.predictive_astrology.insights import LANGUAGES, generate_astrological_response

_LEVEL_MAP = {"debug": logging.DEBUG, "info": logging.INFO, "warning": logging.WARNING, "error": logging.ERROR}


def configure_logging(level_name: str) -> None:
    logger = logging.getLogger("kundali")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(_LEVEL_MAP.get(level_name, logging.WARNING))


def format_dasha_display(birth_date, today=None) -> str:
    """Mahadasha timeline plus antardashas of the running period."""
    current = dasha.current_dasha(birth_date, today)
    running = dasha.current_antardasha(birth_date, today)
    timeline = [
        [("→ " if p.lord == current.lord and p.start_year == current.start_year else "  ") + p.lord,
         p.start_year, p.end_year, p.duration_years]
        for p in dasha.mahadasha_timeline(birth_date)
    ]
    sub_periods = [
        [("→ " if a == running else "  ") + a.lord, a.start_date.isoformat(), a.end_date.isoformat(),
         round(a.duration_years * 12, 1)]
        for a in dasha.antardashas(current)
    ]
    return "\n".join([
        "\nVIMSHOTTARI DASHA",
        tabulate(timeline, headers=['Mahadasha', 'Start', 'End', 'Years'], tablefmt='fancy_grid'),
        f"\nAntardasha Periods within {current.label}:",
        tabulate(sub_periods, headers=['Sub-Lord', 'Start Date', 'End Date', 'Months'], tablefmt='fancy_grid'),
    ])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Vedic birth chart (Kundali) calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --date 1990-06-15 --time 14:30 --place "New Delhi"
  %(prog)s --date 1990-06-15 --time 14:30 --place Mumbai --lat 19.0760 --lon 72.8777 --tz Asia/Kolkata
  %(prog)s --date 1990-06-15 --time 14:30 --place "New Delhi" --ask "How is my career?" --language hinglish
        """
    )
    parser.add_argument('--date', help='Birth date (YYYY-MM-DD)')
    parser.add_argument('--time', help='Birth time (HH:MM, 24h format)')
    parser.add_argument('--place', help='Birth place label')
    parser.add_argument('--lat', type=float, help=f'Latitude (default: {settings.DEFAULT_LATITUDE})')
    parser.add_argument('--lon', type=float, help=f'Longitude (default: {settings.DEFAULT_LONGITUDE})')
    parser.add_argument('--tz', default=None, help=f'Timezone (default: {settings.DEFAULT_TIMEZONE})')
    parser.add_argument('--format', choices=['detailed', 'json'], default='detailed', help='Output format')
    parser.add_argument('--ask', metavar='QUERY', help='Ask the chart a question')
    parser.add_argument('--language', choices=LANGUAGES, default=settings.DEFAULT_LANGUAGE,
                        help='Language of the answer to --ask')
    parser.add_argument('--log-level', default=settings.LOG_LEVEL, choices=sorted(_LEVEL_MAP))
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # Env-supplied defaults bypass argparse choices
    if args.language not in LANGUAGES:
        parser.error(f"unsupported language {args.language!r}; choose from {', '.join(LANGUAGES)}")
    configure_logging(args.log_level)

    details = BirthDetails(date=args.date, time=args.time, place=args.place,
                           latitude=args.lat, longitude=args.lon, timezone=args.tz)
    try:
        result = calculate_kundali(details)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    data = result.data
    answer = generate_astrological_response(args.ask, data, args.language) if args.ask else None

    if args.format == 'json':
        output = data.as_dict()
        output['fallback'] = result.is_fallback
        if answer:
            output['answer'] = answer
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return 0

    print(format_chart_display(data))
    if result.is_fallback:
        print("\nNote: the chart could not be calculated; showing the default chart.")
    else:
        print("\nVEDIC ASPECTS (Drishti)")
        print(aspects.format_aspect_table(data.planets, aspects.house_scores(data.planets)))
        print(format_dasha_display(calc.parse_date(details.date)))
    if answer:
        print(f"\n{answer}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
