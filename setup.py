#!/usr/bin/env python
"""antiset -- installer script"""

from setuptools import setup, find_packages

__license__ = "GPL"

params = {}
params["name"] = "antiset"
params["version"] = "1.0"
params["description"] = "Set algebra over finite sets and anti-sets"
params["packages"] = find_packages(exclude=["test", "test.*"])
params["python_requires"] = ">=3.7"
params["install_requires"] = []
params["extras_require"] = {"test": ["pytest"]}

setup(**params)
