"""
Gradle wrapper invocation.

Compiling, signing and publishing are the Gradle build's job; this module
only runs its tasks with the right properties and environment.
"""

import os
import subprocess
from typing import Dict, List, Optional

from mavenship.utils.console import print_command
from mavenship.utils.errors import PublishError


BUILD_SCRIPTS = ("build.gradle.kts", "build.gradle")


def get_wrapper_name() -> str:
    return "gradlew.bat" if os.name == 'nt' else "./gradlew"


def build_script_path(project_dir: str) -> Optional[str]:
    for name in BUILD_SCRIPTS:
        path = os.path.join(project_dir, name)
        if os.path.isfile(path):
            return path
    return None


def build_reads_property(project_dir: str, name: str) -> Optional[bool]:
    """
    Whether the project's build script mentions a project property.

    Returns:
        None if there is no build script, otherwise True when name appears in it
    """
    path = build_script_path(project_dir)
    if path is None:
        return None
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return name in f.read()


class GradleRunner:
    """Run tasks through the project's Gradle wrapper."""

    def __init__(self, project_dir: str, verbose: bool = False, extra_args: Optional[List[str]] = None):
        self.project_dir = project_dir
        self.verbose = verbose
        self.extra_args = list(extra_args or [])

    @property
    def wrapper_path(self) -> str:
        return os.path.join(self.project_dir, os.path.basename(get_wrapper_name()))

    def build_command(self, tasks: List[str]) -> List[str]:
        cmd = [get_wrapper_name()] + list(tasks) + ["--no-daemon"]
        if self.verbose:
            cmd.append("--info")
        return cmd + self.extra_args

    def run(self, tasks: List[str], env: Optional[Dict[str, str]] = None):
        """
        Run Gradle tasks, aborting on failure.

        Args:
            tasks: Task names, e.g. ["publishToMavenLocal"]
            env: Extra environment variables (ORG_GRADLE_PROJECT_* secrets)

        Raises:
            PublishError: if the wrapper is missing or the build fails
        """
        if not os.path.isfile(self.wrapper_path):
            raise PublishError(
                f"Gradle wrapper not found at {self.wrapper_path}\n"
                "Please run this command from the project root directory"
            )

        cmd = self.build_command(tasks)
        run_env = dict(os.environ)
        run_env.update(env or {})

        # -P values may carry secrets
        print_command(" ".join(a if not a.startswith("-P") else a.split("=", 1)[0] + "=***" for a in cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=self.project_dir,
                env=run_env,
                capture_output=not self.verbose,
                text=True,
                check=False,
            )
        except OSError as e:
            raise PublishError(f"Failed to run {cmd[0]}: {e}") from e

        if result.returncode != 0:
            message = f"Gradle {' '.join(tasks)} failed with exit code: {result.returncode}"
            if not self.verbose and result.stderr:
                message += f"\nError output:\n{result.stderr}"
            raise PublishError(message)
