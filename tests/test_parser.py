"""Unit tests for the SBS-1 parser."""
import pytest
from adsb_beacon.errors import ParseError
from adsb_beacon.models.aircraft import MessageKind
from adsb_beacon.parser import SbsParser


class TestSbsParser:
    """Test cases for SbsParser class."""

    @pytest.fixture
    def parser(self):
        """Create parser instance."""
        return SbsParser()

    def test_parse_position_sentence(self, parser):
        """Test parsing an airborne position message."""
        record = parser.parse_line("MSG,3,,,A0CF8D,,,,,,,28000,,,47.87670,-122.27269,,,0,0,0,0\n")

        assert record.kind == MessageKind.MSG
        assert record.subtype == 3
        assert record.address == 'A0CF8D'
        assert record.altitude == 28000
        assert record.latitude == pytest.approx(47.87670)
        assert record.longitude == pytest.approx(-122.27269)
        assert record.ground_speed is None
        assert record.track is None
        assert record.squawk is None
        assert record.emergency is False
        assert record.on_ground is False
        assert record.has_position is True

    def test_parse_velocity_sentence(self, parser):
        """Test parsing ground speed, track and vertical rate."""
        record = parser.parse_line("MSG,4,,,A0F4F6,,,,,,,,175,152,,,-1152,,0,0,0,0")

        assert record.subtype == 4
        assert record.ground_speed == 175
        assert record.track == 152
        assert record.vertical_rate == -1152
        assert record.altitude is None
        assert record.has_position is False

    def test_parse_identity_sentence(self, parser):
        """Test callsign is kept raw for later normalisation."""
        record = parser.parse_line("MSG,1,,,A2CB32,,,,,,BOE181  ,,,,,,,,0,0,0,0")

        assert record.callsign == 'BOE181  '
        assert record.is_identity_sentence is True

    def test_id_kind_is_identity_sentence(self, parser):
        """Test ID sentences count as identity regardless of subtype."""
        record = parser.parse_line("ID,,,,A2CB32,,,,,,N123AB")

        assert record.kind == MessageKind.ID
        assert record.subtype is None
        assert record.is_identity_sentence is True

    def test_short_sentence_has_absent_trailing_fields(self, parser):
        """Test a 10-field sentence parses with every telemetry field absent."""
        record = parser.parse_line("STA,,5,179,400AE7,10103,2008/11/28,14:58:51.153,2008/11/28")

        assert record.kind == MessageKind.STA
        assert record.address == '400AE7'
        assert record.callsign is None
        assert record.on_ground is None
        assert record.emergency is None

    def test_zero_is_distinct_from_absent(self, parser):
        """Test a present zero value is not mistaken for a missing one."""
        record = parser.parse_line("MSG,4,,,AAB812,,,,,,,,0,0,,,0,,0,0,0,0")

        assert record.ground_speed == 0
        assert record.track == 0

    def test_flags(self, parser):
        """Test -1 flags parse as set."""
        record = parser.parse_line("MSG,5,,,AD815E,,,,,,,575,,,,,,7700,-1,-1,-1,-1")

        assert record.squawk == '7700'
        assert record.squawk_alert is True
        assert record.emergency is True
        assert record.ident is True
        assert record.on_ground is True

    def test_lowercase_address_is_normalised(self, parser):
        record = parser.parse_line("MSG,5,,,ad815e,,,,,,,575,,,,,,,,,,")
        assert record.address == 'AD815E'

    def test_unknown_kind(self, parser):
        record = parser.parse_line("XYZ,1,,,AD815E")
        assert record.kind == MessageKind.UNKNOWN

    def test_garbled_numbers_are_absent(self, parser):
        """Test unparseable numeric fields come back as None."""
        record = parser.parse_line("MSG,3,,,A0CF8D,,,,,,,28x00,,,abc,-122.27269,,,0,0,0,0")

        assert record.altitude is None
        assert record.latitude is None
        assert record.has_position is False

    def test_non_finite_numbers_are_absent(self, parser):
        """Test nan and inf never reach the record."""
        record = parser.parse_line("MSG,3,,,A0CF8D,,,,,,,nan,inf,-inf,nan,1e999,,,0,0,0,0")

        assert record.altitude is None
        assert record.ground_speed is None
        assert record.track is None
        assert record.latitude is None
        assert record.longitude is None

    def test_out_of_range_coordinates_are_absent(self, parser):
        """Test latitudes beyond 90 and longitudes beyond 180 are dropped."""
        test_cases = [
            ('90.5', '10.0', None, 10.0),
            ('-91', '10.0', None, 10.0),
            ('45.0', '180.01', 45.0, None),
            ('45.0', '-200', 45.0, None),
            ('90', '-180', 90.0, -180.0),
        ]

        for lat, lon, expected_lat, expected_lon in test_cases:
            record = parser.parse_line(f"MSG,3,,,A0CF8D,,,,,,,28000,,,{lat},{lon},,,0,0,0,0")
            assert record.latitude == expected_lat, f"Failed for {lat}"
            assert record.longitude == expected_lon, f"Failed for {lon}"

    def test_rejects_malformed_lines(self, parser):
        """Test lines lacking kind, subtype or address are rejected."""
        bad_lines = [
            '',
            '\n',
            '\r\n',
            'MSG',
            'MSG,3',
            'MSG,3,,',
            'MSG,3,,,',
            'MSG,3,,,,,,,,,,28000',
            'MSG,3,,,   ,,,,,,,28000',
        ]

        for line in bad_lines:
            with pytest.raises(ParseError):
                parser.parse_line(line)

    def test_raw_fields_preserved(self, parser):
        """Test the raw field vector keeps empty trailing fields."""
        record = parser.parse_line("MSG,5,,,AD815E,,,,,,,575,,,,,,,,,,")

        assert len(record.fields) == 22
        assert record.fields[11] == '575'
