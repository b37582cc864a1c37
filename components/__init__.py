"""Composite-Model Components Package

This namespace groups *concrete* model and preprocessing adapters that
conform to the scikit-learn API.  Models live under ``components/models`` and
preprocessors under ``components/preprocessors``; file stems match the
names listed in ``scripts.config``.
"""
