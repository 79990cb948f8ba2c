#!/usr/bin/env python3
"""
Tests for the .properties reader/writer and build property lookup.

Run with: python3 -m pytest mavenship/utils/test_properties.py
"""

import os
import tempfile
import unittest

from mavenship.utils.build_properties import BuildProperties, parse_property_args
from mavenship.utils.properties import PropertiesFile, load_properties


class TestPropertiesFile(unittest.TestCase):
    """Test parsing and storing of properties files."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.temp_dir.name, "test.properties")

    def tearDown(self):
        self.temp_dir.cleanup()

    def write(self, content):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(content)

    def read(self):
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read()

    def test_separators(self):
        """Test '=', ':' and whitespace separators."""
        props = PropertiesFile(self.path)
        props.parse("a=1\nb: 2\nc 3\nd   =   4\n")

        self.assertEqual(props.as_dict(), {"a": "1", "b": "2", "c": "3", "d": "4"})

    def test_comments_and_blank_lines_are_skipped(self):
        props = PropertiesFile(self.path)
        props.parse("# comment\n! other comment\n\n  version=1.0.0\n")

        self.assertEqual(props.keys(), ["version"])
        self.assertEqual(props.get("version"), "1.0.0")

    def test_continuation_lines(self):
        props = PropertiesFile(self.path)
        props.parse("list=a,\\\n    b,\\\n    c\nnext=x\n")

        self.assertEqual(props.get("list"), "a,b,c")
        self.assertEqual(props.get("next"), "x")

    def test_escapes(self):
        props = PropertiesFile(self.path)
        props.parse("path=C\\:\\\\tools\nkey\\ with\\ spaces=v\nunicode=caf\\u00e9\ntab=a\\tb\n")

        self.assertEqual(props.get("path"), "C:\\tools")
        self.assertEqual(props.get("key with spaces"), "v")
        self.assertEqual(props.get("unicode"), "café")
        self.assertEqual(props.get("tab"), "a\tb")

    def test_later_duplicate_wins(self):
        props = PropertiesFile(self.path)
        props.parse("version=1.0.0\nversion=2.0.0\n")

        self.assertEqual(props.get("version"), "2.0.0")

    def test_missing_key_returns_default(self):
        props = PropertiesFile(self.path)
        props.parse("a=1\n")

        self.assertIsNone(props.get("b"))
        self.assertEqual(props.get("b", "x"), "x")

    def test_set_preserves_other_lines(self):
        """Test that updating a key rewrites only that key's line."""
        self.write("# Release version\nversion=1.2.3\n\nother = keep me\n")

        props = PropertiesFile.load(self.path)
        props.set("version", "1.2.4")
        props.store()

        self.assertEqual(self.read(), "# Release version\nversion=1.2.4\n\nother = keep me\n")

    def test_set_appends_new_key(self):
        self.write("a=1\n")

        props = PropertiesFile.load(self.path)
        props.set("b", "2")
        props.store()

        self.assertEqual(self.read(), "a=1\nb=2\n")

    def test_store_escapes_values(self):
        props = PropertiesFile(self.path)
        props.set("signing.keyFile", " /keys/private key.asc")
        props.set("name", "Café")
        props.store()

        reloaded = PropertiesFile.load(self.path)
        self.assertEqual(reloaded.get("signing.keyFile"), " /keys/private key.asc")
        self.assertEqual(reloaded.get("name"), "Café")
        self.assertIn("Caf\\u00e9", self.read())

    def test_load_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            PropertiesFile.load(self.path)

    def test_load_properties_missing_file_is_empty(self):
        self.assertEqual(load_properties(self.path), {})


class TestBuildProperties(unittest.TestCase):
    """Test Gradle-style property resolution order."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.project_dir = os.path.join(self.temp_dir.name, "project")
        self.gradle_home = os.path.join(self.temp_dir.name, "gradle-home")
        os.makedirs(self.project_dir)
        os.makedirs(self.gradle_home)
        self.environ = {"GRADLE_USER_HOME": self.gradle_home}

    def tearDown(self):
        self.temp_dir.cleanup()

    def write_props(self, directory, content):
        with open(os.path.join(directory, "gradle.properties"), "w", encoding="utf-8") as f:
            f.write(content)

    def test_command_line_wins(self):
        self.write_props(self.gradle_home, "signing.password=home\n")
        self.write_props(self.project_dir, "signing.password=project\n")

        props = BuildProperties(self.project_dir, {"signing.password": "cli"}, self.environ)

        self.assertEqual(props.find("signing.password"), "cli")

    def test_user_home_before_project(self):
        self.write_props(self.gradle_home, "signing.password=home\n")
        self.write_props(self.project_dir, "signing.password=project\n")

        props = BuildProperties(self.project_dir, {}, self.environ)

        self.assertEqual(props.find("signing.password"), "home")

    def test_project_properties(self):
        self.write_props(self.project_dir, "signing.keyFile=key.asc\n")

        props = BuildProperties(self.project_dir, {}, self.environ)

        self.assertEqual(props.find("signing.keyFile"), "key.asc")

    def test_org_gradle_project_environment(self):
        self.environ["ORG_GRADLE_PROJECT_centralPortalUsername"] = "token-user"

        props = BuildProperties(self.project_dir, {}, self.environ)

        self.assertEqual(props.find("centralPortalUsername"), "token-user")

    def test_plain_environment_fallback(self):
        self.environ["SIGNING_PASSWORD"] = "from-env"

        props = BuildProperties(self.project_dir, {}, self.environ)

        self.assertEqual(props.find("signing.password", "SIGNING_PASSWORD"), "from-env")
        self.assertIsNone(props.find("signing.password"))

    def test_gradle_args(self):
        props = BuildProperties(self.project_dir, {"a": "1"}, self.environ)

        self.assertEqual(props.gradle_args(), ["-Pa=1"])

    def test_secrets_stay_off_the_command_line(self):
        overrides = {
            "signing.keyFile": "key.asc",
            "signing.password": "pgp-pass",
            "centralPortalUsername": "user",
            "centralPortalPassword": "portal-pass",
        }
        props = BuildProperties(self.project_dir, overrides, self.environ)

        args = props.gradle_args()

        self.assertEqual(args, ["-Psigning.keyFile=key.asc"])
        self.assertEqual(props.gradle_environment(), {
            "ORG_GRADLE_PROJECT_signing.password": "pgp-pass",
            "ORG_GRADLE_PROJECT_centralPortalUsername": "user",
            "ORG_GRADLE_PROJECT_centralPortalPassword": "portal-pass",
        })

    def test_parse_property_args(self):
        self.assertEqual(
            parse_property_args(["a=1", "b=x=y"]),
            {"a": "1", "b": "x=y"},
        )
        self.assertEqual(parse_property_args(None), {})
        with self.assertRaises(ValueError):
            parse_property_args(["novalue"])


if __name__ == "__main__":
    unittest.main()
