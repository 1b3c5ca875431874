[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "microshop"
version = "0.1.0"
description = "In-memory user and order services with a gateway resolver that joins users, catalogue items and orders"
requires-python = ">=3.10"
dependencies = []
keywords = ["orders", "users", "catalogue", "gateway", "resolver", "in-memory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
microshop-greeting = "microshop.greeting:main"

[tool.hatch.build.targets.wheel]
packages = ["microshop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
