from setuptools import find_packages, setup

setup(
    name="angular_service_builder",
    packages=find_packages(exclude=["tests"]),
    version="0.1.0",
    description="Генератор TypeScript DTO и Angular сервисов из OpenAPI спецификаций",
    author="lite",
    license="MIT",
    install_requires=[
        "aiohttp>=3.9.0",
        "pydantic>=2.0.0",
        "toml>=0.10.0",
        "httpx>=0.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "black>=23.0.0",
            "isort>=5.12.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "angular-service-builder = angular_service_builder.cli:generate",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
