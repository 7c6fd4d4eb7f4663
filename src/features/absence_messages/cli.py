#!/usr/bin/env python3
import click
import logging
from logging.config import dictConfig
from datetime import datetime

from .code import AbsenceNotice, ClassType, build_absence_message, describe_shift
from .config import MessageSettings, get_school_timezone

# Configure logging
dictConfig({
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',
            'formatter': 'default',
            'level': 'DEBUG'
        }
    },
    'root': {
        'level': 'WARNING',
        'handlers': ['console']
    }
})

logger = logging.getLogger(__name__)

def today_in_school_timezone(timezone_name=None) -> str:
    """Today's date in the school's timezone, formatted dd/mm/yyyy."""
    tz = get_school_timezone(timezone_name)
    return datetime.now(tz).strftime('%d/%m/%Y')

@click.group()
@click.option('--verbose', is_flag=True, help='Log which template and shift phrase were used')
def cli(verbose):
    """Absence notice CLI"""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

@cli.command()
@click.option('--class-type', required=True, type=click.Choice(['regular', 'integral'], case_sensitive=False), help='Regular (one shift) or integral (both shifts)')
@click.option('--full-name', required=True, help='Student full name')
@click.option('--first-name', required=True, help='Student first name')
@click.option('--date', 'absence_date', help='Absence date (dd/mm/yyyy); defaults to today')
@click.option('--shift', 'shift_descriptor', default=None, help='Shift missed, e.g. manhã, tarde, integral')
@click.option('--guardian', 'guardian_first_name', default='', help='Guardian first name')
@click.option('--timezone', 'timezone_name', default=None, help='Timezone used to compute today (default: SCHOOL_TIMEZONE)')
def render(class_type, full_name, first_name, absence_date, shift_descriptor, guardian_first_name, timezone_name):
    """Print the absence notice for one student."""
    if not absence_date:
        try:
            absence_date = today_in_school_timezone(timezone_name)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint='--timezone')

    notice = AbsenceNotice(
        class_type=ClassType.from_label(class_type),
        full_name=full_name,
        first_name=first_name,
        absence_date=absence_date,
        guardian_first_name=guardian_first_name,
        shift_descriptor=shift_descriptor
    )
    if notice.class_type == ClassType.REGULAR and shift_descriptor:
        logger.warning("Shift %r ignored for regular class", shift_descriptor)

    click.echo(build_absence_message(notice, MessageSettings.from_env()))

@cli.command()
@click.argument('descriptor', required=False, default='')
def shift_phrase(descriptor):
    """Print the phrase used for a shift descriptor."""
    click.echo(describe_shift(descriptor))

if __name__ == '__main__':
    cli()
