[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexservice"
version = "0.1.0"
description = "A small hexagonal-architecture HTTP service storing examples in MongoDB"
requires-python = ">=3.10"
keywords = ["fastapi", "mongodb", "hexagonal", "http", "service"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: FastAPI",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "fastapi",
    "uvicorn",
    "pymongo",
    "redis",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "httpx",
]

[project.scripts]
hexservice = "hexservice.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hexservice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
