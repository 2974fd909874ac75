import io
import logging
import unittest

from c4engine.debug import DebugLevel, DebugManager


class TestDebugManager(unittest.TestCase):
    def setUp(self):
        self.manager = DebugManager("c4engine.test")
        self.stream = io.StringIO()
        self.handler = logging.StreamHandler(self.stream)
        self.manager._logger.addHandler(self.handler)

    def tearDown(self):
        self.manager._logger.removeHandler(self.handler)

    def test_level_filtering(self):
        self.manager.configure(level=DebugLevel.INFO)
        self.manager.info("shown", "game")
        self.manager.debug("hidden", "game")
        self.assertIn("[game] shown", self.stream.getvalue())
        self.assertNotIn("hidden", self.stream.getvalue())
        self.assertFalse(self.manager.is_enabled_for(DebugLevel.TRACE, "search"))

    def test_none_silences_errors(self):
        self.manager.configure(level=DebugLevel.NONE)
        self.manager.error("quiet", "game")
        self.assertEqual(self.stream.getvalue(), "")

    def test_component_filter(self):
        self.manager.configure(level=DebugLevel.TRACE, components=["search"])
        self.manager.trace("kept", "search")
        self.manager.debug("dropped", "board")
        self.assertIn("TRACE: [search] kept", self.stream.getvalue())
        self.assertNotIn("dropped", self.stream.getvalue())
        self.manager.configure(components=[])
        self.assertTrue(self.manager.is_enabled_for(DebugLevel.DEBUG, "board"))

    def test_timers(self):
        self.manager.configure(level=DebugLevel.DEBUG)
        self.manager.start_timer("work")
        elapsed = self.manager.end_timer("work", "cli")
        self.assertGreaterEqual(elapsed, 0)
        self.assertIsNone(self.manager.end_timer("work", "cli"))
        self.assertIn("Timer 'work' not started", self.stream.getvalue())

    def test_set_from_string(self):
        self.manager.set_from_string("trace")
        self.assertTrue(self.manager.is_enabled_for(DebugLevel.TRACE))
        self.manager.set_from_string("nonsense")
        self.assertTrue(self.manager.is_enabled_for(DebugLevel.TRACE))


if __name__ == '__main__':
    unittest.main()
