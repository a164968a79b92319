from setuptools import setup, find_packages

from euiaddr import VERSION

setup(
    name="euiaddr",
    description="EUI-48 and EUI-64 hardware address types",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "protobuf",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "euiconv = euiaddr.programs.euiconv:main",
        ],
    },
    python_requires=">=3.10",
    version=VERSION,
)
