import sys
from PowerFormula import printers


PRINTERS = {
    'python'    : printers.printPythonFile,
    'javascript': printers.printJavascriptFile,
    'report'    : printers.printMaxExpPerPrecision,
}


kind = sys.argv[1] if len(sys.argv) > 1 else 'python'
if kind not in PRINTERS:
    sys.exit('Usage: {} [{}]'.format(sys.argv[0], '|'.join(sorted(PRINTERS))))


for line in PRINTERS[kind]():
    print(line)
