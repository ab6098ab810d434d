import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="mobeen_auth",
    version="1.0.0",
    description="Scaffold a NextAuth + Prisma authentication feature into an existing Next.js project",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Environment :: Console",
        "Intended Audience :: Developers",
    ],
    keywords="scaffold nextauth prisma nextjs authentication template installer",
    license="MIT",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mobeen-auth=mobeen_auth.mobeen_auth:mobeen_auth",
        ],
    },
    include_package_data=True,
    package_data={
        "mobeen_auth": [
            "templates/.env.example",
            "templates/prisma/*",
            "templates/src/**/*",
        ],
    },
    zip_safe=False,
)
