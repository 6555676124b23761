import sys
import unittest

from driverdiag.stack import capture_stack, frame_type_name, get_driver_name


def module_level_type_name() -> str:
    return frame_type_name(sys._getframe())


class TestGetDriverName(unittest.TestCase):
    def test_no_match_is_unknown(self):
        self.assertEqual(get_driver_name(["app.main", "app.Runner"]), "unknown")

    def test_empty_stack(self):
        self.assertEqual(get_driver_name([]), "unknown")

    def test_inner_class_does_not_match(self):
        frames = ["com.example.Main", "com.example.FooDriver", "com.example.FooDriver$Inner"]

        self.assertEqual(get_driver_name(frames), "FooDriver")

    def test_last_match_wins(self):
        frames = ["pkg.inner.FirstDriver", "pkg.Helper", "pkg.outer.SecondDriver"]

        self.assertEqual(get_driver_name(frames), "SecondDriver")

    def test_name_without_namespace(self):
        self.assertEqual(get_driver_name(["ChromiumDriver"]), "ChromiumDriver")

    def test_accepts_generator(self):
        frames = (name for name in ["a.BDriver", "c.D"])

        self.assertEqual(get_driver_name(frames), "BDriver")


class TestFrameIntrospection(unittest.TestCase):
    def test_method_frame_uses_owner_class(self):
        self.assertEqual(
            frame_type_name(sys._getframe()), f"{__name__}.TestFrameIntrospection"
        )

    def test_module_function_frame(self):
        self.assertEqual(module_level_type_name(), __name__)

    def test_capture_starts_at_caller(self):
        stack = capture_stack()

        self.assertEqual(stack[0], f"{__name__}.TestFrameIntrospection")
        self.assertGreater(len(stack), 1)

    def test_capture_skip(self):
        def helper():
            return capture_stack(skip=1)

        self.assertEqual(helper()[0], f"{__name__}.TestFrameIntrospection")


if __name__ == "__main__":
    unittest.main()
