"""Configuration package for the LV stock tracker."""
