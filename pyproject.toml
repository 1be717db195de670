[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cadastros"
version = "0.1.0"
description = "Small interactive record keepers and grid-walking robot exercises for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["records", "registry", "terminal", "menu", "grid", "robot", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
condominio = "cadastros.condominio:main"
frota = "cadastros.fleet:main"
biblioteca = "cadastros.library:main"
alunos = "cadastros.students:main"
robo-normal = "cadastros.grid:main"
robo-obstaculos = "cadastros.obstacles:main"
robo-posicoes = "cadastros.waypoints:main"

[tool.hatch.build.targets.wheel]
packages = ["cadastros"]

[tool.pytest.ini_options]
addopts = "-ra"
