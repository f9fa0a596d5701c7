import logging
import unittest

from picross.utils.logger import get_logger, level_from_name


class LoggerTests(unittest.TestCase):
    def test_level_names_are_case_insensitive(self) -> None:
        self.assertEqual(level_from_name("debug"), logging.DEBUG)
        self.assertEqual(level_from_name(" Warning "), logging.WARNING)
        self.assertEqual(level_from_name("ERROR"), logging.ERROR)

    def test_unknown_level_falls_back_to_default(self) -> None:
        self.assertEqual(level_from_name("chatty"), logging.INFO)
        self.assertEqual(level_from_name("chatty", default=logging.ERROR), logging.ERROR)

    def test_loggers_are_namespaced(self) -> None:
        self.assertEqual(get_logger().name, "picross")
        self.assertEqual(get_logger("picross.engine").name, "picross.engine")
        self.assertTrue(logging.getLogger().handlers)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
