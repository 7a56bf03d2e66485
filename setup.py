"""Package listcounter (src layout, console script `listcounter`)."""

from setuptools import find_packages, setup

setup(
    name="listcounter",
    version="0.1.0",
    description="Count and list lines by how often they were used",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["click>=8.1"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["listcounter=listcounter.cli:main"]},
)
