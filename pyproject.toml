[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glscene"
version = "0.1.0"
description = "A small OpenGL scene viewer with a free-look camera, Phong-lit materials and textured geometry"
requires-python = ">=3.10"
keywords = ["opengl", "3d", "camera", "shader", "rendering", "pyglet"]
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
glscene = "glscene.app:main"

[tool.hatch.build.targets.wheel]
packages = ["glscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
