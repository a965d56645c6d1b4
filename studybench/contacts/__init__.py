"""Contact book with binary file storage and a console menu."""