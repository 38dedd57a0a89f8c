from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with test dependencies
#   'pip install -e ".[test]"'
"""

setup(
    name="aggbench",
    version="0.1.0",
    description="Micro-benchmarks for built-in integer aggregations",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "aggbench=aggbench.__main__:main",
        ],
    },
)
