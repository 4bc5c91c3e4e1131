"""A setuptools based setup module.

See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

from os import path
from setuptools import setup

# To use a consistent encoding
from codecs import open

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, "README.rst"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="circuitpython-cap1xxx",
    version="0.1.0",
    description="A CircuitPython driver for the Microchip CAP1xxx (CAP1166, CAP1188, "
    "CAP1208) capacitive touch sensors implementing the Adafruit_BusDevice library.",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    install_requires=["Adafruit-Blinka", "adafruit-circuitpython-busdevice"],
    extras_require={"test": ["pytest"]},
    # Choose your license
    license="MIT",
    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "Topic :: System :: Hardware",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
    # What does your project relate to?
    keywords="adafruit blinka circuitpython CAP1188 CAP1166 CAP1208 "
    "capacitive touch sensor LED driver Microchip",
    packages=["circuitpython_cap1xxx"],
)
