[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storefront"
version = "0.1.0"
description = "A small e-commerce model: products with expiry and shipping policies, shopping carts and customer checkout."
requires-python = ">=3.10"
dependencies = []
keywords = ["e-commerce", "shopping-cart", "checkout", "shipping", "inventory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
storefront = "storefront.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["storefront"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
