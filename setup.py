# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Setup configuration for nodeflow workflow execution engine
"""

from setuptools import setup, find_packages

setup(
    name="nodeflow",
    version="1.0.0",
    description="Workflow execution engine: graph ordering, node dispatch and output interpolation",
    packages=find_packages(include=["nodeflow", "nodeflow.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        "pydantic>=2.0.0",
        "httpx>=0.24.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
        "openai>=1.0.0",
        "anthropic>=0.30.0",
        "google-api-python-client>=2.0.0",
        "google-auth>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ]
    },
)
