"""Tests for flatten_attribute and parse_natural_datetime."""

import datetime

import pandas as pd
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from loaders import flatten_attribute, parse_natural_datetime
from models import DateParseError

NOW = pd.Timestamp('2024-06-01 08:30:00')
WEDNESDAY = pd.Timestamp('2024-06-05 08:00:00')


class TestFlattenAttribute:
    """Test flatten_attribute function."""

    def test_plain_key_passes_through(self):
        """Test non-attribute keys are untouched."""
        assert flatten_attribute('name', 'Srv1') == ('name', 'Srv1')
        assert flatten_attribute('class', 'Server') == ('class', 'Server')

    def test_similar_prefix_passes_through(self):
        """Test keys that only look like attribute columns are untouched."""
        assert flatten_attribute('attribute', 'x') == ('attribute', 'x')
        assert flatten_attribute('attrs-Foo', 'x') == ('attrs-Foo', 'x')
        assert flatten_attribute('AttrDate-Foo', 'x') == ('AttrDate-Foo', 'x')

    def test_plain_attribute(self):
        """Test attr- columns keep their raw value."""
        assert flatten_attribute('attr-Vendor', 'Dell') == ('attribute', 'Vendor=Dell')

    def test_plain_attribute_number(self):
        """Test numeric values are rendered as text."""
        assert flatten_attribute('attr-CPUs', 4) == ('attribute', 'CPUs=4')

    def test_name_keeps_further_hyphens(self):
        """Test only the first hyphen separates type and name."""
        assert flatten_attribute('attr-Serial-No', 'X1') == ('attribute', 'Serial-No=X1')

    def test_date_natural_language(self):
        """Test attrDate- parses text and formats YYYY-MM-DD."""
        assert flatten_attribute('attrDate-Purchased', 'June 1 2024') == \
            ('attribute', 'Purchased=2024-06-01')

    def test_date_drops_time(self):
        """Test attrDate- ignores the time of day."""
        assert flatten_attribute('attrDate-Purchased', '2024-06-01 13:45') == \
            ('attribute', 'Purchased=2024-06-01')

    def test_datetime_includes_time(self):
        """Test attrDateTime- appends a zero-padded 24h time."""
        assert flatten_attribute('attrDateTime-Deployed', '1 Jun 2024 1:05 pm') == \
            ('attribute', 'Deployed=2024-06-01 13:05:00')

    def test_datetime_midnight(self):
        """Test a date-only value gets 00:00:00."""
        assert flatten_attribute('attrDateTime-Deployed', 'June 1 2024') == \
            ('attribute', 'Deployed=2024-06-01 00:00:00')

    def test_date_cell_value(self):
        """Test real date cells are formatted without parsing."""
        value = datetime.datetime(2024, 6, 1, 7, 8, 9)
        assert flatten_attribute('attrDateTime-Deployed', value) == \
            ('attribute', 'Deployed=2024-06-01 07:08:09')

    def test_relative_date(self):
        """Test natural-language relative dates use the reference time."""
        assert flatten_attribute('attrDate-Due', 'tomorrow', now=NOW) == \
            ('attribute', 'Due=2024-06-02')

    def test_day_first_numeric_date(self):
        """Test dd/mm/yyyy cells are read day first."""
        assert flatten_attribute('attrDate-Purchased', '01/06/2024') == \
            ('attribute', 'Purchased=2024-06-01')

    def test_relative_datetime_with_time(self):
        """Test a day keyword followed by a time of day."""
        assert flatten_attribute('attrDateTime-Review', 'tomorrow 10am', now=WEDNESDAY) == \
            ('attribute', 'Review=2024-06-06 10:00:00')

    def test_unparseable_date_raises(self):
        """Test a bad date aborts with DateParseError."""
        with pytest.raises(DateParseError) as exc_info:
            flatten_attribute('attrDate-Purchased', 'not-a-date')
        assert exc_info.value.attribute == 'Purchased'
        assert exc_info.value.value == 'not-a-date'


class TestParseNaturalDatetime:
    """Test parse_natural_datetime function."""

    @pytest.mark.parametrize('text, expected', [
        ('now', '2024-06-01 08:30:00'),
        ('today', '2024-06-01 00:00:00'),
        ('Tomorrow', '2024-06-02 00:00:00'),
        ('yesterday', '2024-05-31 00:00:00'),
        ('in 2 days', '2024-06-03 08:30:00'),
        ('3 weeks ago', '2024-05-11 08:30:00'),
        ('1 month ago', '2024-05-01 08:30:00'),
        ('in 1 year', '2025-06-01 08:30:00'),
        ('90 minutes ago', '2024-06-01 07:00:00'),
    ])
    def test_relative_expressions(self, text, expected):
        """Test keywords and relative phrases."""
        assert parse_natural_datetime(text, now=NOW) == pd.Timestamp(expected)

    @pytest.mark.parametrize('text, expected', [
        ('next monday', '2024-06-10 00:00:00'),
        ('Last Friday', '2024-05-31 00:00:00'),
        ('monday', '2024-06-10 00:00:00'),
        ('wednesday', '2024-06-05 00:00:00'),
        ('next wednesday', '2024-06-12 00:00:00'),
        ('last wednesday', '2024-05-29 00:00:00'),
        ('next week', '2024-06-12 08:00:00'),
        ('last month', '2024-05-05 08:00:00'),
        ('a day ago', '2024-06-04 08:00:00'),
        ('in an hour', '2024-06-05 09:00:00'),
    ])
    def test_weekdays_and_named_offsets(self, text, expected):
        """Test weekday names and next/last phrases from a Wednesday."""
        assert parse_natural_datetime(text, now=WEDNESDAY) == pd.Timestamp(expected)

    @pytest.mark.parametrize('text, expected', [
        ('tomorrow 10am', '2024-06-06 10:00:00'),
        ('yesterday at noon', '2024-06-04 12:00:00'),
        ('next monday 9:30', '2024-06-10 09:30:00'),
        ('last friday at 5:15 pm', '2024-05-31 17:15:00'),
        ('today at midnight', '2024-06-05 00:00:00'),
        ('14:30', '2024-06-05 14:30:00'),
        ('June 1 2024 at 7am', '2024-06-01 07:00:00'),
    ])
    def test_time_of_day_suffix(self, text, expected):
        """Test a trailing time of day replaces the time of the date part."""
        assert parse_natural_datetime(text, now=WEDNESDAY) == pd.Timestamp(expected)

    @pytest.mark.parametrize('text, expected', [
        ('01/06/2024', '2024-06-01'),
        ('13/06/2024', '2024-06-13'),
        ('01.06.2024', '2024-06-01'),
        ('01/06/2024 13:05', '2024-06-01 13:05'),
    ])
    def test_numeric_dates_day_first(self, text, expected):
        """Test numeric dates are read day/month/year."""
        assert parse_natural_datetime(text) == pd.Timestamp(expected)

    @pytest.mark.parametrize('text', ['tomorrow 25:00', '13pm', 'next someday'])
    def test_invalid_natural_phrases(self, text):
        """Test out-of-range times and unknown words raise DateParseError."""
        with pytest.raises(DateParseError):
            parse_natural_datetime(text, now=WEDNESDAY)

    @pytest.mark.parametrize('text', [
        'June 1 2024',
        '1 June 2024',
        '2024-06-01',
        'Jun 1, 2024',
    ])
    def test_absolute_expressions(self, text):
        """Test common absolute date spellings."""
        assert parse_natural_datetime(text) == pd.Timestamp('2024-06-01')

    def test_excel_serial_number(self):
        """Test numeric cells are read as Excel serial dates."""
        assert parse_natural_datetime(45444) == pd.Timestamp('2024-06-01')
        assert parse_natural_datetime(45444.5) == pd.Timestamp('2024-06-01 12:00')

    def test_date_object(self):
        """Test date cells are accepted."""
        assert parse_natural_datetime(datetime.date(2024, 6, 1)) == pd.Timestamp('2024-06-01')

    @pytest.mark.parametrize('value', ['not-a-date', '', '   ', None, True])
    def test_uninterpretable(self, value):
        """Test values without a date raise DateParseError."""
        with pytest.raises(DateParseError):
            parse_natural_datetime(value)
