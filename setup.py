from setuptools import setup, find_packages

setup(
    name="tailwind-term",
    version="0.1.0",
    description="Utility-token styling for terminal text",
    packages=find_packages(include=["tailwind_term", "tailwind_term.*"]),
    install_requires=[
        "colorama>=0.4.6",
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tailwind-term=tailwind_term.cli:main",
        ],
    },
    python_requires=">=3.11",
)
