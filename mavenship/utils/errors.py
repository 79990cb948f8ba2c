#
# Copyright 2026 mavenship Project Authors. All rights reserved.
# Use of this source code is governed by a MIT-style
# license that can be found at
#
# https://opensource.org/license/MIT
#
# The above copyright notice and this permission
# notice shall be included in all copies or
# substantial portions of the Software.


class MavenshipError(Exception):
    """Base exception for failed release preconditions"""
    pass


class SigningError(MavenshipError):
    """Exception raised when signing credentials are missing or unreadable"""
    pass


class BundleError(MavenshipError):
    """Exception raised when the Maven Central bundle cannot be assembled"""
    pass


class PublishError(MavenshipError):
    """Exception raised when the Gradle publishing run fails"""
    pass
