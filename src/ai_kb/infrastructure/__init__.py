"""Filesystem-facing components"""
