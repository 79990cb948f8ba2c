"""
Maven Central bundle assembler.

Collects the artifacts of one version from the local Maven repository,
writes MD5/SHA-1 companions and zips everything under the
<group-path>/<artifactId>/<version>/ prefix expected by Maven Central.
"""

import fnmatch
import os
import zipfile
from typing import List

from mavenship.utils.errors import BundleError
from mavenship.utils.maven.checksum import write_checksums

ARTIFACT_PATTERNS = ('*.jar', '*.pom', '*.module')
COMPANION_PATTERNS = ('*.asc', '*.md5', '*.sha1')
BUNDLE_PATTERNS = ARTIFACT_PATTERNS + COMPANION_PATTERNS


def list_matching_files(directory: str, patterns) -> List[str]:
    """Names of regular files directly inside directory matching any pattern, sorted."""
    names = []
    for name in os.listdir(directory):
        if not os.path.isfile(os.path.join(directory, name)):
            continue
        if any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns):
            names.append(name)
    return sorted(names)


class BundleResult:
    def __init__(self, output_path: str, prefix: str, files: List[str], unsigned: List[str]):
        self.output_path = output_path
        self.prefix = prefix
        self.files = files
        self.unsigned = unsigned

    def entry_names(self) -> List[str]:
        return [f"{self.prefix}/{name}" for name in self.files]


class BundleAssembler:
    """Build bundle.zip for upload to Maven Central."""

    def __init__(self, config: 'MavenConfig', signing: 'SigningConfig', output_path: str,
                 verbose: bool = False):
        """
        Initialize the assembler.

        Args:
            config: MavenConfig instance with the coordinates to bundle
            signing: SigningConfig, bundling is refused without credentials
            output_path: Where to write the zip
            verbose: Enable verbose output
        """
        self.config = config
        self.signing = signing
        self.output_path = output_path
        self.verbose = verbose

    @property
    def prefix(self) -> str:
        return f"{self.config.group_path}/{self.config.artifact_id}/{self.config.version}"

    def check_preconditions(self) -> str:
        """
        Check signing credentials and the local artifact directory.

        Returns:
            The local repository directory of this version

        Raises:
            SigningError: if signing credentials are missing
            BundleError: if the local artifact directory does not exist
        """
        self.signing.require()

        repo_dir = self.config.local_repository_path()
        if not os.path.isdir(repo_dir):
            raise BundleError(f"Local Maven repository artifacts not found at: {repo_dir}")
        return repo_dir

    def assemble(self) -> BundleResult:
        """
        Generate checksums and write the bundle zip.

        Raises:
            SigningError: if signing credentials are missing
            BundleError: if artifacts are missing or the zip cannot be written
        """
        repo_dir = self.check_preconditions()

        artifacts = list_matching_files(repo_dir, ARTIFACT_PATTERNS)
        if not artifacts:
            raise BundleError(
                f"No artifacts ({', '.join(ARTIFACT_PATTERNS)}) found in: {repo_dir}"
            )

        for name in artifacts:
            written = write_checksums(os.path.join(repo_dir, name))
            if self.verbose:
                for path in written.values():
                    print(f"  Generated {os.path.basename(path)}")

        unsigned = [name for name in artifacts
                    if not os.path.isfile(os.path.join(repo_dir, name + '.asc'))]

        files = list_matching_files(repo_dir, BUNDLE_PATTERNS)
        self._write_zip(repo_dir, files)

        return BundleResult(self.output_path, self.prefix, files, unsigned)

    def _write_zip(self, repo_dir: str, files: List[str]):
        parent = os.path.dirname(self.output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        # never leave a half-written bundle behind
        tmp_path = self.output_path + '.tmp'
        try:
            # reproducible builds stamp files with dates zip cannot store
            with zipfile.ZipFile(tmp_path, 'w', zipfile.ZIP_DEFLATED,
                                 strict_timestamps=False) as zipf:
                for name in files:
                    zipf.write(os.path.join(repo_dir, name), f"{self.prefix}/{name}")
            os.replace(tmp_path, self.output_path)
        except (OSError, ValueError) as e:
            raise BundleError(f"Failed to write bundle {self.output_path}: {e}") from e
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def expected_files(self) -> List[str]:
        """File names a complete signed bundle is expected to contain."""
        base = f"{self.config.artifact_id}-{self.config.version}"
        names = [f"{base}.jar"]
        if self.config.publish_sources:
            names.append(f"{base}-sources.jar")
        if self.config.publish_javadoc:
            names.append(f"{base}-javadoc.jar")
        names.append(f"{base}.pom")

        result = []
        for name in names:
            result.append(name)
            result.append(f"{name}.asc")
        return result
