import re
import os
import codecs
from os import path
from io import open
from setuptools import setup, find_packages


here = path.abspath(path.dirname(__file__))

with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

with codecs.open(os.path.join(here, "diagnostic_gateway/__init__.py"), encoding="utf-8") as init_file:
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", init_file.read(), re.M)
    if not version_match:
        raise RuntimeError("Unable to find version string in diagnostic_gateway/__init__.py")
    version_string = version_match.group(1)


requirements = [
    # Web framework
    "fastapi>=0.110.0",
    "uvicorn>=0.38.0",
    "pydantic>=2.0.0",
    "starlette>=0.30.0",

    # HTTP (reCAPTCHA verification)
    "httpx>=0.28.1",

    # Supabase
    "supabase>=2.0.0",

    # Configuration
    "python-dotenv>=1.0.0",

    # Validation utilities
    "disposable-email-domains>=0.0.138",
]

test_requirements = [
    "pytest>=7.4.0",
    "pytest-asyncio>=0.23.0",
]

setup(
    name="diagnostic_intake_gateway",
    version=version_string,
    description="Validated, de-duplicated diagnostic form submission gateway",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(include=['diagnostic_gateway', 'diagnostic_gateway.*']),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
    },
    entry_points={
        "console_scripts": [
            "diagnostic-gateway=diagnostic_gateway.main:main",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Internet :: WWW/HTTP",
    ],
)
