#!/usr/bin/env python3
"""
Tests for artifact checksum companions.

Run with: python3 -m pytest mavenship/utils/maven/test_checksum.py
"""

import hashlib
import os
import tempfile
import unittest

from mavenship.utils.maven.checksum import file_digest, verify_checksum, write_checksums


class TestChecksum(unittest.TestCase):
    """Test MD5/SHA-1 digests and companion files."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.temp_dir.name, "lib-1.0.0.jar")
        with open(self.path, "wb") as f:
            f.write(b"hello")

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_known_digests(self):
        self.assertEqual(file_digest(self.path, "md5"), "5d41402abc4b2a76b9719d911017c592")
        self.assertEqual(file_digest(self.path, "sha1"), "aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d")

    def test_identical_bytes_identical_digests(self):
        other = os.path.join(self.temp_dir.name, "copy.jar")
        with open(other, "wb") as f:
            f.write(b"hello")

        for algorithm in ("md5", "sha1"):
            self.assertEqual(file_digest(self.path, algorithm), file_digest(other, algorithm))

    def test_large_file_is_streamed(self):
        data = os.urandom(100_000)
        with open(self.path, "wb") as f:
            f.write(data)

        self.assertEqual(file_digest(self.path, "sha1"), hashlib.sha1(data).hexdigest())

    def test_unsupported_algorithm(self):
        with self.assertRaises(ValueError):
            file_digest(self.path, "sha512")

    def test_write_checksums(self):
        written = write_checksums(self.path)

        self.assertEqual(set(written), {"md5", "sha1"})
        with open(self.path + ".md5", "r") as f:
            self.assertEqual(f.read(), "5d41402abc4b2a76b9719d911017c592")
        with open(self.path + ".sha1", "r") as f:
            self.assertEqual(f.read(), "aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d")

    def test_verify_checksum(self):
        self.assertFalse(verify_checksum(self.path, "md5"))

        write_checksums(self.path)
        self.assertTrue(verify_checksum(self.path, "md5"))
        self.assertTrue(verify_checksum(self.path, "sha1"))

        with open(self.path, "wb") as f:
            f.write(b"changed")
        self.assertFalse(verify_checksum(self.path, "md5"))

    def test_verify_checksum_sum_tool_layout(self):
        with open(self.path + ".md5", "w") as f:
            f.write("5D41402ABC4B2A76B9719D911017C592  lib-1.0.0.jar\n")

        self.assertTrue(verify_checksum(self.path, "md5"))


if __name__ == "__main__":
    unittest.main()
