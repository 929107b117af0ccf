import argparse
import datetime
import sys
from datetime import date
from pathlib import Path

from setuptools import find_packages, setup

# update this version when a new official pypi release is made
__version__ = "0.1.0"


def get_package_version():
    return __version__


def get_nightly_version():
    today = date.today()
    now = datetime.datetime.now()
    timing = f"{now.hour:02d}{now.minute:02d}"
    return f"{today.year}.{today.month}.{today.day}.{timing}"


def get_dependencies():
    install_requires = [
        "numpy>=1.22",
        "dacite",
        "pyyaml",
        "transforms3d",
        "tyro>=0.8.5",  # nice, typed, command line arg parser
    ]
    return install_requires


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description="cspace_sampling setup.py configuration"
    )
    parser.add_argument(
        "--package_name",
        type=str,
        default="cspace_sampling",
        choices=["cspace_sampling", "cspace_sampling-nightly"],
        help="the name of this output wheel. Should be either 'cspace_sampling' or 'cspace_sampling-nightly'",
    )
    return parser.parse_known_args(argv)


def main(argv):

    args, unknown = parse_args(argv)
    name = args.package_name
    is_nightly = name == "cspace_sampling-nightly"

    this_directory = Path(__file__).parent
    long_description = (this_directory / "README.md").read_text(encoding="utf8")

    if is_nightly:
        version = get_nightly_version()
    else:
        version = get_package_version()

    sys.argv = [sys.argv[0]] + unknown
    setup(
        name=name,
        version=version,
        description="Seeded sampling of points and poses from bounded configuration spaces",
        long_description=long_description,
        long_description_content_type="text/markdown",
        author="cspace_sampling contributors",
        packages=find_packages(include=["cspace_sampling*"]),
        python_requires=">=3.9",
        setup_requires=["setuptools>=62.3.0"],
        install_requires=get_dependencies(),
        extras_require={
            "dev": [
                "pytest",
                "scipy",
                "black",
                "isort",
                "pre-commit",
                "build",
                "twine",
            ],
        },
    )


if __name__ == "__main__":
    main(sys.argv[1:])
