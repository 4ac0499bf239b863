"""
Default values for compiled documents.

Page geometry is fixed; SAMPLE_RESUME_YAML is the starter résumé shown to new
users and used by the end-to-end tests.
"""

PAGE_SIZE = "A4"
PAGE_MARGINS = (40, 42, 40, 42)

# A4 width (595pt) minus left and right page margins
DIVIDER_WIDTH = 515
DIVIDER_LINE_WIDTH = 0.5

# Section titles in render order
CORE_SECTION_TITLES = ("Experience", "Education", "Projects")
EXTENDED_SECTION_TITLES = (
    "Skills",
    "Languages",
    "Awards",
    "Certifications",
    "Publications",
    "References",
)

SAMPLE_RESUME_YAML = """\
resume:
  info:
    name: Hieu Doan
    title: Software Developer
    mobile: +84 123 456 789
    email: first.last@example.com
    website: https://example.com
    address: 123 Main St, City, Country
    gender: Male
  social_networks:
    - platform: GitHub
      username: first.name
    - platform: LinkedIn
      username: first.name
  personal_statement: >
    Passionate software developer with experience in building web applications using modern technologies. Skilled in JavaScript, TypeScript, React, and Node.js. Strong problem-solving abilities and a keen eye for detail.
  sections:
    experiences:
      - company: Example Corp
        position: Software Engineer
        start_date: 2020-01
        end_date: Present
        highlights:
          - Developed awesome features using React and Node.js
          - Improved application performance by 30%
      - company: Another Company
        position: Junior Developer
        start_date: 2018-06
        end_date: 2019-12
        highlights:
          - Collaborated on building web applications
          - Maintained legacy codebases and implemented new features
    education:
      - institution: University of Example
        degree: Bachelor of Science in Computer Science
        start_date: 2016-09
        end_date: 2020-06
        highlights:
          - Graduated with Honors
          - Data Structures, Algorithms, Web Development
    projects:
      - name: Personal Portfolio
        description: A personal website to showcase my projects and skills.
        link: https://portfolio.example.com
      - name: Open Source Library
        description: Developed an open-source library for data visualization.
        link: https://github.com/first.name/opensource-lib
    skills:
      - name: Programming Languages
        keywords:
          - JavaScript
          - TypeScript
          - Python
      - name: Frameworks
        keywords:
          - React
          - Node.js
          - Next.js
    languages:
      - name: English
        proficiency: Fluent
      - name: Spanish
        proficiency: Intermediate
    awards:
      - title: Best Developer Award
        issuer: Example Corp
        date: 2021-12
        description: Recognized for outstanding performance and contributions to the development team.
      - title: Hackathon Winner
        issuer: Local Hack Day
        date: 2019-11
        description: Led a team to victory in a 24-hour coding competition.
    certifications:
      - name: Certified Web Developer
        issuer: Web Dev Institute
        date: 2021-05
      - name: Advanced JavaScript Certificate
        issuer: JS Academy
        date: 2022-08
    publications:
      - title: "Modern Web Development Practices"
        publisher: Tech Journal
        date: 2022-03
        link: https://techjournal.example.com/modern-web-development
      - title: "JavaScript Performance Optimization"
        publisher: Dev Magazine
        date: 2021-09
        link: https://devmagazine.example.com/js-performance
    references:
      - name: Jane Doe
        position: Senior Developer at Example Corp
        contact: first.name@example.com
      - name: John Smith
        position: Team Lead at Another Company
        contact: first.name@example.com
"""
