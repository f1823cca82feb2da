# uwtheme: render decisions and templates for the UW-Madison blog theme
