"""Setup configuration for filekit - Filesystem Utility Toolkit."""

from setuptools import setup, find_packages
import os
import re

# Read requirements from a requirements file
def read_requirements(filename="requirements.txt"):
    """
    Load dependency specifications from a requirements file located next to this module.

    Returns:
        list[str]: Requirement strings (each line stripped), excluding empty lines and lines that begin with `#`.
    """
    requirements_path = os.path.join(os.path.dirname(__file__), filename)
    with open(requirements_path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]

# Read long description from README.md
def read_readme():
    """
    Load the project's long description from a README.md file adjacent to this module.

    Returns:
        str: Contents of README.md as a string, or an empty string if the file does not exist.
    """
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return ""


# Read version from filekit/__init__.py (single source of truth)
def read_version():
    """
    Get the package version defined in filekit/__init__.py.

    Raises:
        RuntimeError: If no __version__ assignment is found in filekit/__init__.py.
    """
    init_path = os.path.join(os.path.dirname(__file__), "filekit", "__init__.py")
    with open(init_path, "r", encoding="utf-8") as f:
        content = f.read()
    match = re.search(r'^__version__\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
    if match:
        return match.group(1)
    raise RuntimeError("Unable to find __version__ in filekit/__init__.py")


setup(
    name="filekit",
    version=read_version(),
    description="Filesystem utility toolkit: tree copy, empty-folder pruning, duplicate detection and unique naming",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    author="filekit Team",
    license="MIT",
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={
        "test": read_requirements("requirements-test.txt"),
    },
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "filekit=filekit.cli:app",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Filesystems",
        "Topic :: Utilities",
    ],
    keywords="filesystem copy duplicate-detection unique-name file-watch",
)
