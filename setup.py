""" ectorus build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ectorus

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ectorus.name,
    version=ectorus.__version__,
    license=ectorus.__license__,
    author=ectorus.__author__,
    author_email=ectorus.__author_email__,
    description="Line-walk and torus-exclusion enumerator of elliptic curve points",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={"test": ["pytest"]},
    keywords=(
        "elliptic-curves finite-fields point-counting tonelli-shanks "
        "group-law tangent secant"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
