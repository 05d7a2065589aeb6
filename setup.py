from os import environ
from subprocess import getstatusoutput  # noqa: S404

from setuptools import find_packages, setup


def get_version() -> str:
    if "VERSION" in environ:
        return environ["VERSION"]

    status, output = getstatusoutput("git describe --tags --always")
    return output.replace("-", "+", 1) if not status and output[:1].isdigit() else "0.1.0"


setup(
    name="PyMoji",
    version=get_version(),
    author="Defelo",
    author_email="elodef42@gmail.com",
    description="Emoji detection and shortcode conversion for chat messages",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["PyMoji", "PyMoji.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=open("requirements.txt").read().splitlines(),
    extras_require={"test": ["pytest"]},
)
