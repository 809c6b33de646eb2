"""Unit tests for report composition."""
import pytest
from adsb_beacon.models.aircraft import AircraftState, EmergencyKind, ReportKind, Symbol
from adsb_beacon.reports import (
    ReportEmitter,
    circle_radius,
    display_speed,
    display_squawk,
    display_track,
    select_symbol,
)
from adsb_beacon.store import AircraftStore


class TestSymbolSelection:
    """Test the speed/altitude symbol heuristic."""

    def test_defaults_to_small_aircraft(self):
        assert select_symbol(None, None) == Symbol.SMALL_AIRCRAFT
        assert select_symbol(0, None) == Symbol.SMALL_AIRCRAFT
        assert select_symbol(100, 5000) == Symbol.SMALL_AIRCRAFT

    def test_slow_is_helicopter(self):
        assert select_symbol(40, None) == Symbol.HELICOPTER
        assert select_symbol(56, 1500) == Symbol.HELICOPTER
        assert select_symbol(57, None) == Symbol.SMALL_AIRCRAFT

    def test_fast_is_large_aircraft(self):
        assert select_symbol(175, None) == Symbol.LARGE_AIRCRAFT
        assert select_symbol(127, 3000) == Symbol.LARGE_AIRCRAFT
        assert select_symbol(126, None) == Symbol.SMALL_AIRCRAFT

    def test_high_altitude_forces_large_aircraft(self):
        assert select_symbol(None, 28000) == Symbol.LARGE_AIRCRAFT
        assert select_symbol(40, 20001) == Symbol.LARGE_AIRCRAFT
        assert select_symbol(None, 20000) == Symbol.SMALL_AIRCRAFT

    def test_high_helicopter_reverts_to_small(self):
        assert select_symbol(40, 10001) == Symbol.SMALL_AIRCRAFT
        assert select_symbol(40, 10000) == Symbol.HELICOPTER


class TestDisplayFields:
    """Test track/speed/squawk rendering."""

    def test_track(self):
        assert display_track(None) == '360'
        assert display_track(0) == '360'
        assert display_track(5) == '005'
        assert display_track(152) == '152'

    def test_speed(self):
        assert display_speed(None) == '000'
        assert display_speed(0) == '000'
        assert display_speed(75) == '075'

    def test_squawk(self):
        assert display_squawk('7700') == '7700'
        assert display_squawk('123') == '0123'

    def test_circle_radius(self):
        assert circle_radius(None, 600) == 10.0
        assert circle_radius(40600, 600) == pytest.approx(80.0)
        assert circle_radius(10600, 600) == pytest.approx(20.0)
        assert circle_radius(100, 600) == 0.0


class TestReportEmitter:
    """Test cases for ReportEmitter class."""

    NOW = 1_700_000_000.0

    @pytest.fixture
    def store(self):
        return AircraftStore()

    @pytest.fixture
    def emitter(self, store, config):
        return ReportEmitter(store, config)

    @pytest.fixture
    def state(self, store):
        state = store.get_or_create('A0CF8D', now=self.NOW)
        state.last_altitude = 28000
        state.last_position = ('4752.60N', '12216.36W')
        state.last_position_time = self.NOW
        state.dirty_count = 2
        return state

    def test_fresh_position_report(self, emitter, state):
        reports = emitter.compose(state, 'U.S.', now=self.NOW)

        assert len(reports) == 1
        assert reports[0].kind == ReportKind.POSITION
        assert reports[0].text == (
            "PLANES>BEACON:)A0CF8D!4752.60N/12216.36W^360/000 /A=028000 (U.S.)"
        )

    def test_full_annotations(self, emitter, state):
        state.last_ground_speed = 45
        state.last_track = 90
        state.last_altitude = 1500
        state.last_identity = 'N123AB'
        state.last_squawk = '7700'
        state.emergency = EmergencyKind.GENERAL
        state.on_ground = True

        reports = emitter.compose(state, 'U.S.', now=self.NOW)

        assert reports[0].text == (
            "PLANES>BEACON:)A0CF8D!4752.60N/12216.36WX090/045 /A=001500"
            " N123AB EMERGENCY=General SQUAWK=7700 On_Ground (U.S.)"
        )

    def test_position_within_ttl_is_fresh(self, emitter, state):
        reports = emitter.compose(state, 'U.S.', now=self.NOW + 1)
        assert reports[0].kind == ReportKind.POSITION

    def test_stale_position_report(self, emitter, state):
        state.last_squawk = '1200'

        reports = emitter.compose(state, 'U.S.', now=self.NOW + 12)

        assert len(reports) == 1
        assert reports[0].kind == ReportKind.STALE
        assert reports[0].text == "PLANES>BEACON:>A0CF8D SQUAWK=1200 (U.S.) (12s)"
        assert '4752.60N' not in reports[0].text

    def test_status_report_without_position(self, emitter, state):
        state.last_position = None
        state.last_position_time = None
        state.last_identity = 'BOE181'

        reports = emitter.compose(state, 'U.S.', now=self.NOW)

        assert len(reports) == 1
        assert reports[0].kind == ReportKind.STATUS
        assert reports[0].text == "PLANES>BEACON:>A0CF8D BOE181 (U.S.)"

    def test_circle_overlay(self, emitter, config, state):
        config.ENABLE_CIRCLES = True
        state.last_position = None
        state.last_position_time = None
        state.last_altitude = 10600

        reports = emitter.compose(state, 'U.S.', now=self.NOW)

        assert [r.kind for r in reports] == [ReportKind.STATUS, ReportKind.CIRCLE]
        assert reports[1].text == (
            "PLANES>BEACON:)A0CF8D!4754.00N/12218.00W'360/000 /A=010600 (U.S.) [Pmin20.0,]"
        )

    def test_circle_default_radius(self, emitter, config, state):
        config.ENABLE_CIRCLES = True
        state.last_position = None
        state.last_altitude = None

        reports = emitter.compose(state, 'U.S.', now=self.NOW)

        assert reports[1].text.endswith("(U.S.) [Pmin10.0,]")

    def test_no_circle_with_position(self, emitter, config, state):
        config.ENABLE_CIRCLES = True
        reports = emitter.compose(state, 'U.S.', now=self.NOW)
        assert [r.kind for r in reports] == [ReportKind.POSITION]

    def test_tactical_report(self, emitter, state):
        state.assign_tactical_label('A0CF8D (U.S.)')

        report = emitter.tactical_report(state)

        assert report.kind == ReportKind.TACTICAL
        assert report.text == "PLANES>BEACON::TACTICAL :A0CF8D=A0CF8D (U.S.)"

    def test_coverage_text(self, emitter, store, state):
        store.get_or_create('A00002', now=self.NOW).last_altitude = 3000

        assert emitter.coverage_text() == "ADS-B:50.0% (1/2)"

    def test_coverage_text_empty(self, config):
        assert ReportEmitter(AircraftStore(), config).coverage_text() == ""
