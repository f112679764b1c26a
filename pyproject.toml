[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "vrscene"
version = "0.1.0"
description = "Scene-tree imitator for VR rendering: animated scene nodes, JSON scene serialization and UDP broadcast of datagrams"
requires-python = ">=3.10"
dependencies = []
keywords = ["vr", "scene graph", "simulation", "udp", "broadcast", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vrscene-imitator = "vrscene.imitator:main"
vrscene-server = "vrscene.server:main"
vrscene-client = "vrscene.client:main"

[tool.setuptools.packages.find]
include = ["vrscene*"]

[tool.pytest.ini_options]
addopts = "-ra"
