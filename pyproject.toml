[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metricsfacade"
version = "0.1.0"
description = "A lightweight metrics facade: counters, gauges and histograms routed to a pluggable recorder."
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "telemetry", "counter", "gauge", "histogram", "instrumentation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Monitoring",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metricsfacade-demo = "metricsfacade.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["metricsfacade"]

[tool.pytest.ini_options]
addopts = "-ra"
