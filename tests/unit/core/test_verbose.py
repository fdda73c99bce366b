# tests/unit/core/test_verbose.py
# Unit tests for verbose logging helpers & output manager registry

from unittest.mock import MagicMock

from countdown.core.output import (
    NullOutputManager,
    OutputInterface,
    OutputLevel,
    get_output_manager,
    reset_output_manager,
    set_output_manager,
)
from countdown.core.verbose import (
    init_verbose,
    is_verbose_enabled,
    vlog,
    vlog_config,
    vlog_engine,
    vlog_tick,
)
from countdown.cli.output_manager import OutputManager


# * Test registry behaviour
class TestRegistry:

    # * Default manager is the no-op NullOutputManager
    def test_default_is_null(self):
        reset_output_manager()
        manager = get_output_manager()
        assert isinstance(manager, NullOutputManager)
        assert isinstance(manager, OutputInterface)
        assert manager.get_level() == OutputLevel.NORMAL

    # * set_output_manager replaces the registered manager
    def test_set_output_manager(self):
        mock_manager = MagicMock()
        set_output_manager(mock_manager)
        assert get_output_manager() is mock_manager
        reset_output_manager()


# * Test init_verbose level selection
class TestInitVerbose:

    # * Disabled -> NORMAL
    def test_disabled(self):
        init_verbose(enabled=False)
        assert get_output_manager().get_level() == OutputLevel.NORMAL
        assert is_verbose_enabled() is False

    # * Enabled -> VERBOSE
    def test_enabled(self):
        init_verbose(enabled=True)
        assert isinstance(get_output_manager(), OutputManager)
        assert is_verbose_enabled() is True
        assert get_output_manager().is_debug_enabled() is False

    # * Enabled w/ dev_mode -> DEBUG
    def test_enabled_dev_mode(self):
        init_verbose(enabled=True, dev_mode=True)
        assert get_output_manager().get_level() == OutputLevel.DEBUG


# * Test helper delegation
class TestHelpers:

    # * vlog forwards category & detail
    def test_vlog(self):
        manager = MagicMock()
        set_output_manager(manager)
        vlog("CAT", "message", "detail")
        manager.verbose.assert_called_once_with("message", "CAT", "detail")

    # * vlog_engine uses ENGINE category
    def test_vlog_engine(self):
        manager = MagicMock()
        set_output_manager(manager)
        vlog_engine("Started", "interval=1000ms")
        manager.verbose.assert_called_once_with("Started", "ENGINE", "interval=1000ms")

    # * vlog_tick logs at debug level only
    def test_vlog_tick(self):
        manager = MagicMock()
        set_output_manager(manager)
        vlog_tick(4000, 1000)
        manager.verbose.assert_not_called()
        manager.debug.assert_called_once_with("-1000ms, 4000ms remaining", "TICK")

    # * vlog_config formats key = value
    def test_vlog_config(self):
        manager = MagicMock()
        set_output_manager(manager)
        vlog_config("tick_interval_ms", 250)
        manager.verbose.assert_called_once_with("tick_interval_ms = 250", "CONFIG")
