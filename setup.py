from setuptools import setup

setup(
    name="markstyle",
    version="1.0.0",
    description="Convert Markdown into styled text spans: fonts, colors, and links.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    project_urls={
        "Source": "https://github.com/markstyle/markstyle",
        "Tracker": "https://github.com/markstyle/markstyle/issues",
    },
    packages=["markstyle"],
    package_data={"markstyle": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        "typing_extensions>=4.4",
    ],
    extras_require={
        "test": [
            "pytest>=8",
            "sybil>=6",
        ],
        "doc": [
            "sphinx>=7",
            "furo",
        ],
    },
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: Markup :: Markdown",
        "Typing :: Typed",
    ],
)
