[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hw3dkit"
version = "0.1.0"
description = "Vectors, colours, triangle meshes, primitive shapes, OBJ loading and pan/zoom views for simple 3D rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "mesh", "vector", "obj", "wavefront", "pan", "zoom", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hw3dkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
