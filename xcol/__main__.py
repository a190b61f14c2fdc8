from xcol.cli import main

main()
