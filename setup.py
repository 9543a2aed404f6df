# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- STATE & CONFIG ---
    "pydantic>=2.5.0",
    "pyyaml>=6.0.0",
    "python-dotenv>=1.0.0",

    # --- CONSOLE UI ---
    "rich>=13.0.0",
]

extras_require = {
    # --- TESTS ---
    "test": [
        "pytest",
        "pytest-asyncio>=0.23",
    ],
}

setup(
    name="DemoAI_Console",
    version="0.3.0",
    description="DemoAI | mocked product dashboard state engine",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "demoai=demoai.console.main:main",
        ],
    },
    python_requires=">=3.10",
)
