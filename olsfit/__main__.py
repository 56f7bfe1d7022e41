from olsfit.cli import main_entry

main_entry()
