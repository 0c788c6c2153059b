[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "logregkit"
version = "0.1.0"
description = "Binary logistic regression trained by gradient descent on CSV data, with a predictor for saved models"
requires-python = ">=3.10"
dependencies = []
keywords = ["logistic regression", "machine learning", "gradient descent", "classification", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logreg = "logregkit.train:main"
logreg-predict = "logregkit.predict:main"

[tool.setuptools.packages.find]
include = ["logregkit*"]

[tool.pytest.ini_options]
addopts = "-ra"
