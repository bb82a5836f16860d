"""
Test package structure - imports work from an editable install
"""

import os
import unittest


PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class TestPackageStructure(unittest.TestCase):
    """Test that the package and bundled resources are in place"""

    def test_config_import(self):
        try:
            import config
        except ImportError as e:
            self.skipTest(f"config import failed: {e}. Install with: pip install -e .")
        self.assertTrue(config.BUNDLED_SOUNDS_ROOT)

    def test_entry_point_importable(self):
        from sfx.cli import main
        self.assertTrue(callable(main))

    def test_bundled_tree_has_every_event(self):
        """Test: resources/sounds ships at least one playable file per event"""
        from sfx.sound_events import SOUND_EVENTS
        from sfx.sound_library import scan_sound_folder

        root = os.path.join(PROJECT_ROOT, "resources", "sounds")
        for event in SOUND_EVENTS:
            with self.subTest(event=event):
                self.assertTrue(scan_sound_folder(os.path.join(root, event)))

    def test_no_sys_path_manipulation_in_package(self):
        package_dir = os.path.join(PROJECT_ROOT, "sfx")
        for name in os.listdir(package_dir):
            if not name.endswith(".py"):
                continue
            with open(os.path.join(package_dir, name), "r", encoding="utf-8") as f:
                content = f.read()
            self.assertNotIn("sys.path.insert", content, name)
            self.assertNotIn("sys.path.append", content, name)
