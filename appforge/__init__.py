"""appforge: interactive frontend project scaffolder.

Collects one choice per axis (framework, runtime, package manager and the
optional libraries), resolves them into a set of template files and writes
the resulting project to disk.
"""

__version__ = "0.3.0"
