[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qcpfview"
version = "1.0.0"
description = "View configuration model, binary config storage and sample plugins for a plugin-based application framework"
requires-python = ">=3.10"
dependencies = []
keywords = ["plugins", "view-model", "configuration", "menus", "toolbars", "datastream"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qcpfview"]

[tool.pytest.ini_options]
addopts = "-ra"
