from qemuargs.cli import main

main()
