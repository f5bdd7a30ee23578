"""Test suite for the scoring service"""
