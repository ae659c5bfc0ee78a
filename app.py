"""Top-level launcher for ColorPicker.

Allows starting the app with `python app.py` from the repo root.
"""
from colorpicker.app import UsefulTools

if __name__ == '__main__':
    UsefulTools().mainloop()
