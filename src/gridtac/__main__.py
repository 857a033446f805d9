from gridtac.cli import main

main()
