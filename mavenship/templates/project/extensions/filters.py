import json
import re

from jinja2.ext import Extension

_SEMVER = re.compile(r"^\d+\.\d+\.\d+$")


def group_path(group_id):
    return str(group_id).replace(".", "/")


def toml_string(value):
    # JSON string escapes are valid TOML basic-string escapes
    return json.dumps(str(value), ensure_ascii=False)


def is_semver(value):
    return bool(_SEMVER.match(str(value).strip()))


class MavenFiltersExtension(Extension):
    def __init__(self, environment):
        super().__init__(environment)
        environment.filters["group_path"] = group_path
        environment.filters["toml_string"] = toml_string
        environment.tests["semver"] = is_semver
