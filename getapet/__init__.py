"""Pet Explorer: browse adoptable pets by category and adopt them."""

__version__ = "0.1.0"
