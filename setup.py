import re
from pathlib import Path

import toml
from setuptools import find_packages, setup

version = re.search(r'^__version__ = "([^"]+)"', Path("activeresource/__init__.py").read_text(), re.M).group(1)

setup_variables = toml.load("pyproject.toml")["tool"]["flit"]["metadata"]

setup(
    name=setup_variables["dist-name"],
    version=version,
    classifiers=setup_variables["classifiers"],
    author=setup_variables["author"],
    author_email=setup_variables["author-email"],
    packages=find_packages(include=[setup_variables["module"], f"{setup_variables['module']}.*"]),
    install_requires=setup_variables["requires"],
    extras_require=setup_variables["requires-extra"],
    python_requires=setup_variables["requires-python"],
    description="Sorting of active resource queries on real and virtual attributes",
    long_description=Path(setup_variables["description-file"]).read_text(),
    long_description_content_type="text/markdown",
)
