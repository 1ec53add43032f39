"""Configuration, logging and error primitives for Passport AutoFill."""
