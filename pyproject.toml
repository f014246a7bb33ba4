[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lambdaanalyzer"
version = "0.1.0"
description = "Compute throttle and timeout rates for serverless functions from CloudWatch metrics and Logs Insights"
requires-python = ">=3.10"
dependencies = []
keywords = ["aws", "lambda", "cloudwatch", "logs-insights", "monitoring", "metrics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lambdaanalyzer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
