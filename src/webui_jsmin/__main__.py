from webui_jsmin.main import main

main()
