import traceback
from pathlib import Path
import sys
# make scripts runnable directly by ensuring project root is on sys.path
sys.path.insert(0, str(Path(__file__).parent.parent))
log = Path(__file__).parent.parent / 'start_log.txt'
try:
    from colorpicker.app import UsefulTools
    from colorpicker.exporter import inspect_png
    print('imported UsefulTools')
    a = UsefulTools()
    print('instantiated')
    picker = a.open_color_picker()
    a.update()
    print('picker opened')
    data, name = picker.exporter.export(picker.model.snapshot())
    size, center = inspect_png(data)
    print(f'rendered {name}: {size[0]}x{size[1]} center {center}')
    picker.close()
    print('picker closed, open =', a.windows.is_open())
    a.destroy()
    print('destroyed')
    log.write_text('OK')
except Exception as e:
    s = traceback.format_exc()
    log.write_text(s)
    print('exception written to start_log.txt')
