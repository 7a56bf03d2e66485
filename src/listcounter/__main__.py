from listcounter.cli import main

main()
