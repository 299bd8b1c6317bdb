
from setuptools import find_packages, setup

setup(
    name="osservice",
    version="0.1.0",
    description="Run a program as a native OS service (launchd, systemd, SysV, rc.d, Windows SCM)",
    packages=find_packages(include=["osservice", "osservice.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration validation
        "jinja2",  # Service descriptor templates
        "typer",  # Command line
        "rich",  # Terminal formatting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "osservice=osservice.cli:main",
        ],
    },
)
