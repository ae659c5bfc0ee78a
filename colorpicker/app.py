"""ColorPicker - Tkinter color picker with HEX copy and PNG swatch export."""
import tkinter as tk
from tkinter import ttk, filedialog
from tkinter import HORIZONTAL, LEFT, RIGHT
from PIL import Image, ImageTk, ImageDraw

from colorpicker.color_model import CHANNELS, CHANNEL_MAX, CHANNEL_MIN, ColorModel
from colorpicker.debug import debug_log
from colorpicker.exporter import ColorExporter
from colorpicker.feedback import COPIED_TEXT, CopyFeedback
from colorpicker.window_manager import WindowManager

SWATCH_SIZE = 170
PICKER_GEOMETRY = '560x240'
LAUNCHER_GEOMETRY = '320x140'


class TkSaveDialog:
    """Save-panel collaborator for ColorExporter.save."""

    def __init__(self, parent):
        self.parent = parent

    def ask_path(self, suggested_name: str):
        return filedialog.asksaveasfilename(
            parent=self.parent,
            title='Export Color as PNG',
            initialfile=suggested_name,
            defaultextension='.png',
            filetypes=[('PNG', '*.png')],
        )


def _make_icon():
    # 32x32 swatch icon: three overlapping channel discs
    ico = Image.new('RGBA', (32, 32), (0, 0, 0, 0))
    draw = ImageDraw.Draw(ico)
    draw.ellipse((2, 2, 19, 19), fill=(220, 50, 47, 255))
    draw.ellipse((12, 2, 29, 19), fill=(38, 166, 91, 255))
    draw.ellipse((7, 12, 24, 29), fill=(38, 110, 220, 255))
    return ico


class ColorPickerWindow(tk.Toplevel):
    def __init__(self, master, on_close=None, model: ColorModel = None, exporter: ColorExporter = None):
        super().__init__(master)
        self.title('Color Picker')
        self.geometry(PICKER_GEOMETRY)
        self.model = model or ColorModel()
        self.exporter = exporter or ColorExporter()
        self._on_close = on_close
        self.save_dialog = TkSaveDialog(self)
        self._build_ui()
        self.feedback = CopyFeedback(
            schedule=self.after,
            cancel=self.after_cancel,
            show=lambda: self.copied_label.grid(),
            hide=lambda: self.copied_label.grid_remove(),
        )
        self._unsubscribe = self.model.subscribe(lambda m: self._refresh())
        self._refresh()
        self.protocol('WM_DELETE_WINDOW', self.close)
        self.bring_to_front()

    def _build_ui(self):
        root = ttk.Frame(self, padding=16)
        root.pack(fill='both', expand=True)

        # Left: the current color
        self.swatch = tk.Frame(root, width=SWATCH_SIZE, height=SWATCH_SIZE, relief='flat')
        self.swatch.pack(side=LEFT, padx=(0, 20))
        self.swatch.pack_propagate(False)

        # Right: HEX field, copy/export, channel rows
        right = ttk.Frame(root)
        right.pack(side=LEFT, fill='both', expand=True)

        top = ttk.Frame(right)
        top.pack(fill='x', pady=(0, 12))
        self.hex_var = tk.StringVar()
        self.hex_entry = ttk.Entry(top, textvariable=self.hex_var, width=10, font=('TkDefaultFont', 16, 'bold'))
        self.hex_entry.grid(row=1, column=0, sticky='w')
        self.hex_entry.bind('<Return>', lambda e: self.submit_hex())
        self.copied_label = tk.Label(top, text=COPIED_TEXT, bg='#333333', fg='white', padx=5, pady=2)
        self.copied_label.grid(row=0, column=1, columnspan=2)
        self.copied_label.grid_remove()
        self.copy_btn = ttk.Button(top, text='Copy', command=self.copy_hex, width=8)
        self.copy_btn.grid(row=1, column=1, padx=(12, 4))
        self.export_btn = ttk.Button(top, text='Export', command=self.export_color, width=8)
        self.export_btn.grid(row=1, column=2, padx=4)
        top.grid_columnconfigure(0, weight=1)

        self.scale_vars = {}
        self.entry_vars = {}
        for ch in CHANNELS:
            row = ttk.Frame(right)
            row.pack(fill='x', pady=4)
            ttk.Label(row, text=f'{ch.capitalize()}:', width=7).pack(side=LEFT)
            sv = tk.DoubleVar()
            scale = ttk.Scale(row, from_=CHANNEL_MIN, to=CHANNEL_MAX, orient=HORIZONTAL, variable=sv,
                              command=lambda v, ch=ch: self.model.set_channel(ch, float(v)))
            scale.pack(side=LEFT, fill='x', expand=True, padx=6)
            ev = tk.StringVar()
            entry = ttk.Entry(row, textvariable=ev, width=5)
            entry.pack(side=RIGHT)
            entry.bind('<Return>', lambda e, ch=ch: self.submit_channel(ch))
            entry.bind('<FocusOut>', lambda e, ch=ch: self.submit_channel(ch))
            self.scale_vars[ch] = sv
            self.entry_vars[ch] = ev

    def _refresh(self):
        self.swatch.configure(background=self.model.hex)
        self.hex_var.set(self.model.hex)
        for ch in CHANNELS:
            value = getattr(self.model, ch)
            self.scale_vars[ch].set(value)
            self.entry_vars[ch].set(str(int(value)))

    def submit_hex(self):
        # invalid text is left in the field untouched
        if not self.model.set_from_hex(self.hex_var.get()):
            debug_log(f'ignored HEX input: {self.hex_var.get()!r}')

    def submit_channel(self, ch):
        if not self.model.set_channel_text(ch, self.entry_vars[ch].get()):
            self.entry_vars[ch].set(str(int(getattr(self.model, ch))))

    def copy_hex(self):
        self.clipboard_clear()
        self.clipboard_append(self.model.hex)
        self.feedback.trigger()
        debug_log(f'copied {self.model.hex}')

    def export_color(self):
        return self.exporter.save(self.model.snapshot(), self.save_dialog)

    def bring_to_front(self):
        self.deiconify()
        self.lift()
        self.focus_force()

    def close(self):
        self.feedback.cancel()
        self._unsubscribe()
        if self._on_close is not None:
            self._on_close()
        self.destroy()


class UsefulTools(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title('Useful Tools')
        self.geometry(LAUNCHER_GEOMETRY)
        try:
            self._icon_photo = ImageTk.PhotoImage(_make_icon())
            self.iconphoto(True, self._icon_photo)
        except tk.TclError:
            self._icon_photo = None
        self.windows = WindowManager(self._create_picker)
        self._build_ui()

    def _build_ui(self):
        frame = ttk.Frame(self, padding=16)
        frame.pack(fill='both', expand=True)
        ttk.Label(frame, text='Useful Tools').pack(anchor='w')
        open_btn = ttk.Button(frame, text='Open Color Picker', command=self.open_color_picker, width=20)
        open_btn.pack(side=LEFT, pady=12, ipady=4)
        quit_btn = ttk.Button(frame, text='Quit', command=self.destroy, width=8)
        quit_btn.pack(side=RIGHT, pady=12, ipady=4)
        self.open_btn = open_btn

    def _create_picker(self, on_close):
        return ColorPickerWindow(self, on_close=on_close)

    def open_color_picker(self):
        return self.windows.open()


def main():
    debug_log('ColorPicker: starting')
    app = UsefulTools()
    app.mainloop()
    debug_log('ColorPicker: mainloop exited')


if __name__ == '__main__':
    main()
