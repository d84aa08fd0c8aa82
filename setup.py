# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="webui-jsmin",
    version="1.0.0",
    description="Streaming JavaScript minifier for build-time bundling of runtime helpers",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["webui_jsmin*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'webui-jsmin=webui_jsmin.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
