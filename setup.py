import setuptools

setuptools.setup(
    name="worker-tools",
    version="0.1.0",
    packages=setuptools.find_packages(include=["worker_tools", "worker_tools.*"]),
    description="Manage secrets on versions of deployed Workers",
    long_description="Command line tools to list, delete, and create or update secrets on Worker versions.",
    python_requires=">=3.11",
    install_requires=[
        "click",
        "pydantic>=2",
        "requests",
        "requests-toolbelt",
    ],
    extras_require={
        "test": ["pytest", "python-dotenv"],
    },
    entry_points={
        "console_scripts": ["workers = worker_tools.cli.main:main"],
    },
    include_package_data=True,
    zip_safe=False,
)
