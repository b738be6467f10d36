from setuptools import setup, find_namespace_packages

setup(
    name="langtour",
    version="0.1.0",
    description="A tour of core language features as runnable console demos",
    package_dir={"": "src"},
    packages=find_namespace_packages(
        where="src",
        include=["langtour*"],
        exclude=("tests",)
    ),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "myst-parser", "furo"],
    },
    entry_points={
        "console_scripts": ["langtour=langtour.cli:main"],
    },
)
