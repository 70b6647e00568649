from md2html.main import main

main(prog_name="md2html")
