[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "armlut"
version = "0.1.0"
description = "Instruction decoder and opcode lookup-table generator for the ARM7TDMI ARM and Thumb instruction sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["arm7tdmi", "arm", "thumb", "decoder", "lookup-table", "emulator", "code-generation"]
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
    "Topic :: Software Development :: Code Generators",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
armlut = "armlut.lut:main"

[tool.hatch.build.targets.wheel]
packages = ["armlut"]

[tool.pytest.ini_options]
addopts = "-ra"
