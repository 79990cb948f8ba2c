#!/usr/bin/env python3
"""
Tests for semantic version parsing, bumping and the version file.

Run with: python3 -m pytest mavenship/utils/version/test_version.py
"""

import os
import tempfile
import unittest

from mavenship.utils.version import SemanticVersion, VersionFile, parse_version


class TestSemanticVersion(unittest.TestCase):
    """Test parsing and bump rules."""

    def test_parse(self):
        self.assertEqual(parse_version("1.2.3"), SemanticVersion(1, 2, 3))
        self.assertEqual(parse_version(" 10.0.42\n"), SemanticVersion(10, 0, 42))
        self.assertEqual(str(parse_version("0.0.0")), "0.0.0")

    def test_parse_rejects_malformed(self):
        for value in ["", "1", "1.2", "1.2.3.4", "v1.2.3", "1.2.3-SNAPSHOT",
                      "-1.2.3", "1.-2.3", "a.b.c", "1..3", "UNKNOWN"]:
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_version(value)

    def test_parse_rejects_non_string(self):
        with self.assertRaises(ValueError):
            parse_version(None)

    def test_bump_patch_increments_only_patch(self):
        for major, minor, patch in [(0, 0, 0), (1, 2, 3), (4, 0, 99), (12, 7, 0)]:
            with self.subTest(version=(major, minor, patch)):
                bumped = SemanticVersion(major, minor, patch).bump("patch")
                self.assertEqual(bumped, SemanticVersion(major, minor, patch + 1))

    def test_bump_minor_zeroes_patch(self):
        for major, minor, patch in [(0, 0, 0), (1, 2, 3), (4, 0, 99), (12, 7, 0)]:
            with self.subTest(version=(major, minor, patch)):
                bumped = SemanticVersion(major, minor, patch).bump("minor")
                self.assertEqual(bumped, SemanticVersion(major, minor + 1, 0))

    def test_bump_major_zeroes_minor_and_patch(self):
        for major, minor, patch in [(0, 0, 0), (1, 2, 3), (4, 0, 99), (12, 7, 0)]:
            with self.subTest(version=(major, minor, patch)):
                bumped = SemanticVersion(major, minor, patch).bump("major")
                self.assertEqual(bumped, SemanticVersion(major + 1, 0, 0))

    def test_bump_unknown_part(self):
        with self.assertRaises(ValueError):
            SemanticVersion(1, 2, 3).bump("build")


class TestVersionFile(unittest.TestCase):
    """Test reading and bumping version.properties."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.temp_dir.name, "version.properties")

    def tearDown(self):
        self.temp_dir.cleanup()

    def write(self, content):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(content)

    def read(self):
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read()

    def test_read(self):
        self.write("version=0.1.7\n")

        self.assertEqual(VersionFile(self.path).read(), SemanticVersion(0, 1, 7))

    def test_read_missing_file(self):
        with self.assertRaises(FileNotFoundError) as ctx:
            VersionFile(self.path).read()
        self.assertIn("Version file not found", str(ctx.exception))

    def test_read_missing_key(self):
        self.write("name=sdk\n")

        with self.assertRaises(ValueError):
            VersionFile(self.path).read()

    def test_read_malformed_value(self):
        self.write("version=1.2\n")

        with self.assertRaises(ValueError):
            VersionFile(self.path).read()

    def test_bump_writes_back(self):
        self.write("version=1.9.9\n")
        version_file = VersionFile(self.path)

        self.assertEqual(version_file.bump("patch"), SemanticVersion(1, 9, 10))
        self.assertEqual(version_file.bump("minor"), SemanticVersion(1, 10, 0))
        self.assertEqual(version_file.bump("major"), SemanticVersion(2, 0, 0))
        self.assertEqual(self.read(), "version=2.0.0\n")

    def test_bump_keeps_comments_and_other_keys(self):
        self.write("#Mon Oct 19 10:00:00 UTC 2026\nversion=3.4.5\nchannel=stable\n")

        VersionFile(self.path).bump("minor")

        self.assertEqual(self.read(), "#Mon Oct 19 10:00:00 UTC 2026\nversion=3.5.0\nchannel=stable\n")

    def test_failed_bump_leaves_file_untouched(self):
        self.write("version=not-a-version\n")

        with self.assertRaises(ValueError):
            VersionFile(self.path).bump("patch")
        self.assertEqual(self.read(), "version=not-a-version\n")


if __name__ == "__main__":
    unittest.main()
