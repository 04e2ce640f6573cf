from serverinfo.cli import main

main()
