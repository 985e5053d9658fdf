[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advertrec"
version = "0.1.0"
description = "Request handlers for an advert recommendation service: ad plans, creatives, recommendations, user interests and ad events"
requires-python = ">=3.10"
dependencies = []
keywords = ["advertising", "recommendation", "ad-plans", "creatives", "user-interests", "handlers"]
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
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["advertrec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
