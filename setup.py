import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

setuptools.setup(
    name="ethereum-chainspec-builtins",
    version="0.1.0",
    description="Schema and decoder for builtin contract declarations in Ethereum chain specifications",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.11",
    packages=setuptools.find_packages(
        include=[
            "ethereum_chainspec_base_types*",
            "ethereum_chainspec_builtins*",
            "cli*",
            "config*",
        ]
    ),
    install_requires=[
        "pydantic>=2.8,<3",
        "click>=8.1",
        "rich>=13.7",
    ],
    extras_require={
        "test": [
            "pytest>=8",
        ],
    },
    entry_points={
        "console_scripts": [
            "check_builtins=cli.check_builtins:check_builtins",
        ],
    },
)
