[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codedrills"
version = "0.1.0"
description = "Small programming drills: Project Euler solutions, number puzzles, language basics and two tiny JSON web APIs."
requires-python = ">=3.10"
keywords = ["project-euler", "collatz", "primes", "fibonacci", "exercises", "flask", "rest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "flask",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
codedrills-euler = "codedrills.euler:main"
codedrills-collatz = "codedrills.collatz:main"
codedrills-primes = "codedrills.primes:main"
codedrills-weather = "codedrills.weather:main"
codedrills-basics = "codedrills.basics:main"
codedrills-fibapi = "codedrills.fibapi:main"
codedrills-noteapi = "codedrills.noteapi:main"
codedrills-userdb = "codedrills.userdb:main"

[tool.hatch.build.targets.wheel]
packages = ["codedrills"]

[tool.hatch.build.targets.sdist]
include = ["codedrills", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
