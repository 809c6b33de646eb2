import signal
import threading

import pytest
from adsb_beacon import config as config_module
from adsb_beacon import main as main_module
from adsb_beacon.config import Config
from adsb_beacon.errors import ConfigurationError
from adsb_beacon.feed import FileFeed
from adsb_beacon.main import BeaconMonitor, build_config, parse_args


class TestConfig:
    """Test configuration validation."""

    def test_valid(self, config):
        assert config.validate() is True

    @pytest.mark.parametrize('attribute,value', [
        ('CALLSIGN', ''),
        ('PASSCODE', ''),
        ('FEED_PORT', 0),
        ('DELIVERY_PORT', 70000),
        ('POSITION_TTL_SECONDS', -1),
        ('DELIVERY_MODE', 'carrier-pigeon'),
    ])
    def test_invalid(self, config, attribute, value):
        setattr(config, attribute, value)
        with pytest.raises(ConfigurationError):
            config.validate()

    def test_http_requires_url(self, config):
        config.DELIVERY_MODE = 'http'
        with pytest.raises(ConfigurationError, match="DELIVERY_URL"):
            config.validate()

    def test_circles_require_operator_position(self, config):
        config.ENABLE_CIRCLES = True
        config.OPERATOR_LATITUDE = None
        with pytest.raises(ConfigurationError):
            config.validate()

    def test_circles_check_coordinate_range(self, config):
        config.ENABLE_CIRCLES = True
        config.OPERATOR_LONGITUDE = 200.0
        with pytest.raises(ConfigurationError, match="OPERATOR_LONGITUDE"):
            config.validate()

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)

    def test_unparseable_number_falls_back_and_is_recorded(self, monkeypatch):
        monkeypatch.setattr(config_module, '_invalid_settings', [])
        monkeypatch.setenv('FEED_PORT', 'thirty')
        monkeypatch.setenv('POSITION_TTL_SECONDS', '0.5')

        assert config_module._env_number('FEED_PORT', 30003, int) == 30003
        assert config_module._env_number('POSITION_TTL_SECONDS', 1.0) == 0.5
        assert config_module._invalid_settings == ["FEED_PORT='thirty'"]

    def test_unparseable_number_fails_validation(self, config):
        config.INVALID_SETTINGS = ["FEED_PORT='thirty'"]
        with pytest.raises(ConfigurationError, match="FEED_PORT"):
            config.validate()


class TestCommandLine:
    """Test argument handling."""

    def test_overrides(self):
        args = parse_args(['n0call', ' 12345 ', '--circles', '--logging', '--replay', 'capture.sbs'])
        config = build_config(args)

        assert config.CALLSIGN == 'N0CALL'
        assert config.PASSCODE == '12345'
        assert config.ENABLE_CIRCLES is True
        assert config.ENABLE_REPORT_LOG is True
        assert args.replay == 'capture.sbs'

    def test_defaults_come_from_environment(self, monkeypatch):
        monkeypatch.setattr(Config, 'CALLSIGN', 'ENVCALL')
        config = build_config(parse_args([]))

        assert config.CALLSIGN == 'ENVCALL'
        assert config.ENABLE_CIRCLES is Config.ENABLE_CIRCLES


class TestBeaconMonitor:
    """Test cases for BeaconMonitor"""

    @pytest.fixture
    def capture(self, tmp_path, make_line):
        path = tmp_path / 'capture.sbs'
        path.write_text('\n'.join([
            make_line('MSG', 3, 'A0CF8D', altitude=28000, lat='47.87670', lon='-122.27269'),
            make_line('MSG', 3, 'A0CF8D', altitude=28000, lat='47.87670', lon='-122.27269'),
            'not a sentence',
            make_line('MSG', 4, '3C4B26', speed=410, track=92),
        ]) + '\n', encoding='latin-1')
        return path

    @pytest.fixture
    def stop_event(self):
        return threading.Event()

    @pytest.fixture
    def monitor(self, config, sink, capture, stop_event):
        feed = FileFeed(str(capture), stop_event)
        return BeaconMonitor(config, sink=sink, feed=feed, stop_event=stop_event)

    def test_rejects_invalid_config(self, config, sink):
        config.CALLSIGN = ''
        with pytest.raises(ConfigurationError):
            BeaconMonitor(config, sink=sink, feed=FileFeed('unused'))

    def test_run_replays_capture(self, monitor, sink):
        assert monitor.run() == 4

        assert monitor.records_processed == 4
        assert monitor.reports_delivered == 3
        assert sink.reports == [
            "PLANES>BEACON::TACTICAL :A0CF8D=A0CF8D (U.S.)",
            "PLANES>BEACON:)A0CF8D!4752.60N/12216.36W^360/000 /A=028000 (U.S.)",
            "PLANES>BEACON:>3C4B26 (Germany)",
        ]
        assert sink.closed is True

    def test_stop_before_run(self, monitor, sink):
        monitor.stop(signal.SIGTERM, None)

        assert monitor.run() == 0
        assert sink.reports == []
        assert sink.closed is True

    def test_sweep_expires_silent_aircraft(self, monitor, clock):
        monitor.tracker.clock = clock
        monitor._last_sweep = clock()
        monitor.store.get_or_create('A0CF8D', now=clock() - 1000)

        clock.advance(30)
        monitor._sweep_expired()
        assert 'A0CF8D' in monitor.store

        clock.advance(30)
        monitor._sweep_expired()
        assert 'A0CF8D' not in monitor.store


class TestMain:
    """Test the command-line entry point."""

    @pytest.fixture(autouse=True)
    def no_signal_handlers(self, monkeypatch):
        monkeypatch.setattr(signal, 'signal', lambda signum, handler: None)

    @pytest.fixture
    def use_sink(self, monkeypatch, sink):
        monkeypatch.setattr(main_module, 'get_delivery_sink', lambda config: sink)
        monkeypatch.setattr(Config, 'ENABLE_CIRCLES', False)
        monkeypatch.setattr(Config, 'DELIVERY_MODE', 'udp')
        return sink

    def test_replay(self, use_sink, tmp_path, make_line):
        path = tmp_path / 'capture.sbs'
        path.write_text(make_line('MSG', 5, 'A0CF8D', altitude=12000) + '\n', encoding='latin-1')

        main_module.main(['PLANES', '12345', '--replay', str(path)])

        assert use_sink.reports == ["PLANES>BEACON:>A0CF8D (U.S.)"]

    def test_missing_credentials_exit(self, use_sink, monkeypatch):
        monkeypatch.setattr(Config, 'CALLSIGN', '')
        monkeypatch.setattr(Config, 'PASSCODE', '')

        with pytest.raises(SystemExit) as excinfo:
            main_module.main([])
        assert excinfo.value.code == 1

    def test_unparseable_setting_exit(self, use_sink, monkeypatch, caplog):
        monkeypatch.setattr(Config, 'INVALID_SETTINGS', ["POSITION_TTL_SECONDS='soon'"])

        with pytest.raises(SystemExit) as excinfo:
            main_module.main(['PLANES', '12345'])
        assert excinfo.value.code == 1
        assert "Invalid configuration" in caplog.text

    def test_missing_replay_file_exit(self, use_sink, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main_module.main(['PLANES', '12345', '--replay', str(tmp_path / 'missing.sbs')])
        assert excinfo.value.code == 1

    def test_rejected_delivery_exit(self, use_sink, tmp_path, make_line):
        use_sink.accept = False
        path = tmp_path / 'capture.sbs'
        path.write_text(make_line('MSG', 5, 'A0CF8D', altitude=12000) + '\n', encoding='latin-1')

        with pytest.raises(SystemExit) as excinfo:
            main_module.main(['PLANES', '12345', '--replay', str(path)])
        assert excinfo.value.code == 1
        assert use_sink.closed is True
