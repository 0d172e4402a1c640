from setuptools import setup, find_packages

setup(
    name="textpolish",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "requests",
        "python-dotenv",
        "colorama>=0.4.6",
        "pyperclip",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "textpolish=textpolish.cli:main",
        ],
    },
    author="tsilva",
    description="A command line tool to improve text using an LLM",
    keywords="llm, openai, writing, cli",
    python_requires=">=3.8",
)
