[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toonview"
version = "0.1.0"
description = "Interactive OBJ model viewer with toon and cross-hatch shading"
requires-python = ">=3.10"
keywords = ["opengl", "obj", "wavefront", "toon-shading", "viewer", "3d", "glsl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
toonview = "toonview.app:main"
toonview-textured = "toonview.app:main_textured"

[tool.hatch.build.targets.wheel]
packages = ["toonview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
