[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weekendtracer"
version = "0.1.0"
description = "A small path tracer with spheres, quads, BVH, textures and Monte Carlo helpers"
requires-python = ">=3.10"
keywords = ["ray tracing", "path tracing", "rendering", "bvh", "monte carlo", "ppm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
weekendtracer = "weekendtracer.scenes:main"
weekendtracer-montecarlo = "weekendtracer.montecarlo:main"

[tool.hatch.build.targets.wheel]
packages = ["weekendtracer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
