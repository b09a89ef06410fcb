"""Tests for the protocol reactor and its event system."""

import unittest
from unittest.mock import Mock

import pytest

from g13profile.compiler import ModeCompiler
from g13profile.core import ProtocolReactor, ReactorState
from g13profile.models import Meta, Mode, ModeSettings, Profile
from g13profile.protocol import DaemonEvent, DaemonEventType
from g13profile.protocols import ReactorEvent, ReactorObserver

from conftest import FakeChannel


def make_base_nav() -> Profile:
    return Profile(
        modes={
            "base": Mode(keys={"g1": "KEY_A"}),
            "nav": Mode(keys={"g1": ">mode base"}),
        }
    )


def make_three_modes() -> Profile:
    return Profile(
        modes={
            "one": Mode(keys={"g1": "KEY_1"}),
            "two": Mode(keys={"g1": "KEY_2"}, settings=ModeSettings(rgb=[0, 255, 0])),
            "three": Mode(keys={"g1": "KEY_3"}),
        }
    )


class TestProtocolReactor(unittest.TestCase):
    """Test reactor activation and event handling."""

    def make_reactor(self, profile: Profile, *lines: str, **kwargs) -> ProtocolReactor:
        self.channel = FakeChannel(lines)
        self.output = Mock()
        self.diagnostics = Mock()
        return ProtocolReactor(
            profile,
            self.channel,
            output=self.output,
            diagnostics=self.diagnostics,
            **kwargs,
        )

    def test_create_reactor(self):
        """Test a new reactor is idle and has sent nothing."""
        reactor = self.make_reactor(make_base_nav())
        assert reactor.state is ReactorState.IDLE
        assert reactor.current_mode is None
        assert self.channel.batches == []

    def test_start_sends_starting_mode(self):
        """Test the starting mode is sent as one batch."""
        reactor = self.make_reactor(make_base_nav())
        reactor.start()

        assert self.channel.batches == [["rgb 255 0 0", "bind G1 KEY_A"]]
        assert reactor.current_mode == "base"
        assert reactor.state is ReactorState.ACTIVE

    def test_start_uses_meta_starting_mode(self):
        """Test meta.startingMode overrides the first mode."""
        profile = Profile(
            meta=Meta(starting_mode="nav"),
            modes={"base": Mode(keys={"g1": "KEY_A"}), "nav": Mode(keys={"g1": ">mode base"})},
        )
        reactor = self.make_reactor(profile)
        reactor.start()

        assert reactor.current_mode == "nav"
        assert self.channel.batches == [["rgb 255 0 0", "bind G1 >mode base"]]

    def test_start_twice_raises(self):
        """Test that start is only valid once."""
        reactor = self.make_reactor(make_base_nav())
        reactor.start()
        with self.assertRaises(RuntimeError):
            reactor.start()

    def test_handle_line_before_start_raises(self):
        """Test that events are rejected before the first activation."""
        reactor = self.make_reactor(make_base_nav())
        with self.assertRaises(RuntimeError):
            reactor.handle_line("modeup")

    def test_named_mode_switch(self):
        """Test the base/nav scenario: mode nav sends nav's bindings."""
        reactor = self.make_reactor(make_base_nav(), "mode nav")
        reactor.run()

        assert self.channel.batches == [
            ["rgb 255 0 0", "bind G1 KEY_A"],
            ["rgb 255 0 0", "bind G1 >mode base"],
        ]
        self.diagnostics.assert_not_called()

    def test_undefined_mode(self):
        """Test that an unknown mode is reported and nothing is sent."""
        reactor = self.make_reactor(make_base_nav())
        reactor.start()
        reactor.handle_line("mode gaming")

        assert len(self.channel.batches) == 1
        assert reactor.current_mode == "base"
        self.diagnostics.assert_called_once_with("mode 'gaming' is undefined!")

    def test_other_lines_pass_through(self):
        """Test that status text is echoed to the operator unchanged."""
        reactor = self.make_reactor(make_base_nav(), "hello there", "mode", "mode ")
        reactor.run()

        assert len(self.channel.batches) == 1
        assert [c.args[0] for c in self.output.call_args_list] == ["hello there", "mode", "mode "]

    def test_end_of_stream_terminates(self):
        """Test that run returns once the channel is exhausted."""
        reactor = self.make_reactor(make_base_nav())
        reactor.run()

        assert reactor.state is ReactorState.TERMINATED
        assert reactor.current_mode == "base"

    def test_trailing_newline_stripped(self):
        """Test that a raw line with a newline is handled like a stripped one."""
        reactor = self.make_reactor(make_base_nav())
        reactor.start()
        reactor.handle_line("mode nav\n")

        assert reactor.current_mode == "nav"

    def test_modeup_cycles(self):
        """Test modeup walks the modes in file order and wraps."""
        reactor = self.make_reactor(make_three_modes(), "modeup", "modeup", "modeup")
        reactor.run()

        sent_modes = [batch[1] for batch in self.channel.batches]
        assert sent_modes == ["bind G1 KEY_1", "bind G1 KEY_2", "bind G1 KEY_3", "bind G1 KEY_1"]
        assert self.channel.batches[1][0] == "rgb 0 255 0"

    def test_modedown_wraps_to_last(self):
        """Test modedown from the first mode goes to the last."""
        reactor = self.make_reactor(make_three_modes(), "modedown")
        reactor.run()

        assert reactor.current_mode == "three"

    def test_relative_prefix_match(self):
        """Test that modeup/modedown are matched as prefixes."""
        reactor = self.make_reactor(make_three_modes(), "modeup 1", "modedownXYZ")
        reactor.run()

        assert reactor.current_mode == "one"
        assert len(self.channel.batches) == 3
        assert [c.args[0] for c in self.output.call_args_list] == ["modeup", "modedown"]

    def test_no_wrap_clamps(self):
        """Test that with wrapping off the ends send nothing."""
        reactor = self.make_reactor(make_three_modes(), "modedown", wrap_modes=False)
        reactor.run()

        assert reactor.current_mode == "one"
        assert len(self.channel.batches) == 1
        self.output.assert_called_once_with("modedown")

    def test_single_mode_relative_switch_is_noop(self):
        """Test that a one-mode profile ignores modeup."""
        reactor = self.make_reactor(Profile(modes={"only": Mode()}), "modeup", "modedown")
        reactor.run()

        assert len(self.channel.batches) == 1
        assert [c.args[0] for c in self.output.call_args_list] == ["modeup", "modedown"]

    def test_key_display_output(self):
        """Test the key-map is printed after each activation when enabled."""
        profile = Profile(
            meta=Meta(key_display=True),
            modes={"base": Mode(keys={"g1": "KEY_A"}), "nav": Mode(keys={"g1": ">mode base"})},
        )
        reactor = self.make_reactor(profile, "mode nav")
        reactor.run()

        renderings = [c.args[0] for c in self.output.call_args_list]
        assert len(renderings) == 2
        assert "[ a ]" in renderings[0]
        assert "[ Mb]" in renderings[1]
        assert not renderings[1].endswith("\n")

    def test_custom_compiler(self):
        """Test that an injected compiler is used."""
        profile = make_base_nav()
        compiler = ModeCompiler(profile)
        reactor = self.make_reactor(profile, compiler=compiler)
        assert reactor.compiler is compiler


class TestReactorObservers(unittest.TestCase):
    """Test reactor observer notifications."""

    def setUp(self):
        self.observer = Mock(spec=ReactorObserver)

    def test_register_and_unregister(self):
        """Test that an unregistered observer hears nothing."""
        reactor = ProtocolReactor(make_base_nav(), FakeChannel(), output=Mock(), diagnostics=Mock())
        reactor.register_observer(self.observer)
        reactor.unregister_observer(self.observer)
        reactor.start()

        self.observer.on_reactor_event.assert_not_called()

    def test_events(self):
        """Test activation, undefined mode and end of stream events."""
        reactor = ProtocolReactor(
            make_base_nav(),
            FakeChannel(["mode nav", "mode nope"]),
            output=Mock(),
            diagnostics=Mock(),
        )
        reactor.register_observer(self.observer)
        reactor.run()

        events = [c.args for c in self.observer.on_reactor_event.call_args_list]
        assert events == [
            (ReactorEvent.MODE_ACTIVATED, "base"),
            (ReactorEvent.MODE_ACTIVATED, "nav"),
            (ReactorEvent.MODE_UNDEFINED, "nope"),
            (ReactorEvent.STREAM_CLOSED, None),
        ]

    def test_failing_observer_does_not_stop_reactor(self):
        """Test that an observer exception is contained."""
        self.observer.on_reactor_event.side_effect = RuntimeError("boom")
        channel = FakeChannel(["mode nav"])
        reactor = ProtocolReactor(make_base_nav(), channel, output=Mock(), diagnostics=Mock())
        reactor.register_observer(self.observer)
        reactor.run()

        assert reactor.current_mode == "nav"
        assert len(channel.batches) == 2


class TestDaemonEvent:
    """Test daemon line parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line,event_type,mode_name",
        [
            ("modeup", DaemonEventType.MODE_UP, None),
            ("modeupper", DaemonEventType.MODE_UP, None),
            ("modedown", DaemonEventType.MODE_DOWN, None),
            ("mode nav", DaemonEventType.MODE, "nav"),
            ("mode my mode", DaemonEventType.MODE, "my mode"),
            ("mode ", DaemonEventType.OUTPUT, None),
            ("mode", DaemonEventType.OUTPUT, None),
            ("", DaemonEventType.OUTPUT, None),
            ("status: ok", DaemonEventType.OUTPUT, None),
        ],
    )
    def test_parse(self, line, event_type, mode_name):
        """Test each kind of daemon line."""
        event = DaemonEvent.parse(line)
        assert event.type is event_type
        assert event.mode_name == mode_name
        assert event.line == line
