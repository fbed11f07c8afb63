[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astroship"
version = "0.1.0"
description = "Jeu de rôle spatial en console : explorez des planètes, combattez au dé et récoltez de l'uranium pour rentrer chez vous."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "console", "space", "text-adventure", "dice"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
astroship = "astroship.intro:main"

[tool.hatch.build.targets.wheel]
packages = ["astroship"]

[tool.pytest.ini_options]
addopts = "-ra"
