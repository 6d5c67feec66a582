from rapidocui.cli import main

main()
