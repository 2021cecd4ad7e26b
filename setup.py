#!/usr/bin/env python3
from setuptools import setup
import subprocess
import os


def git_version():
    try:
        out = subprocess.run(['git', 'describe', '--tags'], stdout=subprocess.PIPE, stderr=subprocess.DEVNULL).stdout
    except OSError:
        return None
    return out.decode().strip() or None


ver = os.environ.get("PKGVER") or git_version() or "0.1.0"

reqs = []
with open('requirements.txt') as f:
    for l in f:
        if not l.strip():
            continue
        if l.find("://") != -1:
            s = l.strip().split("=", 1)
            reqs.append("{} @ {}".format(s[1], s[0]))
        else:
            reqs.append(l.strip())

setup(
    name = 'discography',
    packages = [
        'discography',
        'discography.types',
        ],
    version = ver,
    description = 'Artist/song relationships with a single source of truth',
    install_requires = reqs,
    extras_require = {
        'test': ['pytest'],
    },
    license = 'MIT',
)
