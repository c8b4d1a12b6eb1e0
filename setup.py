import setuptools

setuptools.setup(
    name="rtcsdp",
    version="1.0.0",
    description="An object model for the Session Description Protocol (SDP)",
    long_description="rtcsdp parses SDP documents into session, media and "
    "codec blocks, lets you edit them and serializes them back to text.",
    license="BSD",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
    ],
    package_dir={"": "src"},
    packages=["rtcsdp", "rtcsdp.lines"],
    python_requires=">=3.9",
    install_requires=["attrs>=21.3.0"],
    extras_require={"dev": ["coverage[toml]>=7.2.2"]},
)
