import logging
from datetime import datetime
from unittest.mock import patch

import pytz
from click.testing import CliRunner

from src.features.absence_messages.cli import cli, today_in_school_timezone
from src.features.absence_messages.config import JUSTIFICATION_FORM_URL

def test_render_regular(student):
    runner = CliRunner()
    result = runner.invoke(cli, ['render', '--class-type', 'regular', '--date', '10/05/2024'] + student)

    assert result.exit_code == 0
    assert "*João Silva*" in result.output
    assert "*10/05/2024*" in result.output
    assert JUSTIFICATION_FORM_URL in result.output
    assert "full-day" not in result.output

def test_render_integral_with_shift(student):
    runner = CliRunner()
    result = runner.invoke(cli, [
        'render', '--class-type', 'INTEGRAL', '--date', '10/05/2024', '--shift', 'tarde'
    ] + student)

    assert result.exit_code == 0
    assert "in the *afternoon* period." in result.output
    assert "*Important for full-day students:*" in result.output

def test_render_uses_configured_institution(monkeypatch, student):
    monkeypatch.setenv('INSTITUTION_NAME', 'EE Monteiro Lobato')
    runner = CliRunner()
    result = runner.invoke(cli, ['render', '--class-type', 'regular', '--date', '10/05/2024'] + student)

    assert result.exit_code == 0
    assert "*EE Monteiro Lobato Team*" in result.output

def test_render_defaults_to_today(student):
    with patch('src.features.absence_messages.cli.today_in_school_timezone', return_value='19/10/2026') as mock_today:
        runner = CliRunner()
        result = runner.invoke(cli, ['render', '--class-type', 'regular'] + student)

    assert result.exit_code == 0
    mock_today.assert_called_once_with(None)
    assert "*19/10/2026*" in result.output

def test_render_rejects_unknown_timezone(student):
    runner = CliRunner()
    result = runner.invoke(cli, ['render', '--class-type', 'regular', '--timezone', 'Mars/Olympus'] + student)

    assert result.exit_code == 2
    assert "Unknown timezone" in result.output

def test_render_requires_class_type(student):
    runner = CliRunner()
    result = runner.invoke(cli, ['render', '--date', '10/05/2024'] + student)

    assert result.exit_code == 2
    assert "Missing option" in result.output
    assert "--class-type" in result.output

def test_shift_phrase_command():
    runner = CliRunner()

    result = runner.invoke(cli, ['shift-phrase', 'Noturno'])
    assert result.exit_code == 0
    assert result.output == "in the *Noturno* shift\n"

    result = runner.invoke(cli, ['shift-phrase'])
    assert result.exit_code == 0
    assert result.output == "\n"

def test_render_regular_ignores_shift(student, caplog):
    """Test a shift given for a regular class is logged and left out of the message."""
    runner = CliRunner()
    with caplog.at_level(logging.WARNING):
        result = runner.invoke(cli, [
            'render', '--class-type', 'regular', '--date', '10/05/2024', '--shift', 'manhã'
        ] + student)

    assert result.exit_code == 0
    assert "morning" not in result.output
    assert "Shift 'manhã' ignored for regular class" in caplog.text

def test_today_in_school_timezone():
    """Test today is taken in the school timezone and formatted dd/mm/yyyy."""
    with patch('src.features.absence_messages.cli.datetime') as mock_datetime:
        mock_datetime.now.return_value = datetime(2024, 5, 3, 7, 30)
        today = today_in_school_timezone('America/Manaus')

    mock_datetime.now.assert_called_once_with(pytz.timezone('America/Manaus'))
    assert today == '03/05/2024'
